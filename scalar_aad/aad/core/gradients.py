# aad/core/gradients.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator

from .node import Node, NodeId


def _key(key) -> NodeId:
    if isinstance(key, Node):
        return key.id
    if isinstance(key, int) and not isinstance(key, bool):
        return NodeId(key)
    raise TypeError(f"GradientStore keys are Node or NodeId, got {type(key)}")


class GradientStore(Mapping):
    """
    Read-only result of one backward pass: node id -> ∂root/∂node.

    Lookups accept either a Node or its id. Nodes that never received a
    contribution are absent; `get` reports them as 0.0.
    """

    def __init__(self, grads: Dict[NodeId, float]):
        self._grads = dict(grads)

    def __getitem__(self, key) -> float:
        return self._grads[_key(key)]

    def __contains__(self, key) -> bool:
        try:
            return _key(key) in self._grads
        except TypeError:
            return False

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._grads)

    def __len__(self) -> int:
        return len(self._grads)

    def get(self, key, default: float = 0.0) -> float:
        return self._grads.get(_key(key), default)

    def __repr__(self):
        return f"GradientStore({self._grads!r})"
