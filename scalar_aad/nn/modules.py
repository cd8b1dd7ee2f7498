"""
Neuron / Layer / MLP built on the scalar AAD graph.

Parameters are constant leaf nodes. Nodes are immutable, so a module is never
updated in place: `with_parameters` returns a new module of the same shape
around a fresh list of leaves (typically the output of `sgd_step`).
"""

from typing import List, Optional, Sequence

import numpy as np

from ..aad.core.node import Node
from ..aad.ops import constant, tanh


class Module:
    """Common interface: parameters() and with_parameters(params)."""

    def parameters(self) -> List[Node]:
        return []

    def n_params(self) -> int:
        return len(self.parameters())

    def with_parameters(self, params: Sequence[Node]) -> "Module":
        raise NotImplementedError

    def _check_count(self, params: Sequence[Node]) -> None:
        if len(params) != self.n_params():
            raise ValueError(
                f"{type(self).__name__} expects {self.n_params()} parameters, got {len(params)}"
            )


class Neuron(Module):
    """
    act = bias + Σ w_i · x_i, followed by tanh when `nonlin` is set.

    Weights start uniform in [-1, 1], the bias at 0.0.
    """

    def __init__(self, nin: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [constant(float(v)) for v in rng.uniform(-1.0, 1.0, size=nin)]
        self.b = constant(0.0)
        self.nonlin = nonlin

    @classmethod
    def _from_parts(cls, w: List[Node], b: Node, nonlin: bool) -> "Neuron":
        neuron = cls.__new__(cls)
        neuron.w = list(w)
        neuron.b = b
        neuron.nonlin = nonlin
        return neuron

    def __call__(self, x) -> Node:
        if len(x) != len(self.w):
            raise ValueError(f"mismatch between input dim {len(x)} and weight dim {len(self.w)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi
        return tanh(act) if self.nonlin else act

    def parameters(self) -> List[Node]:
        return self.w + [self.b]

    def with_parameters(self, params: Sequence[Node]) -> "Neuron":
        self._check_count(params)
        params = list(params)
        return Neuron._from_parts(params[:-1], params[-1], self.nonlin)

    def __repr__(self):
        return f"{'Tanh' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):
    def __init__(self, nin: int, nout: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def __call__(self, x) -> List[Node]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def with_parameters(self, params: Sequence[Node]) -> "Layer":
        self._check_count(params)
        params = list(params)
        layer = Layer.__new__(Layer)
        layer.neurons = []
        start = 0
        for n in self.neurons:
            stop = start + n.n_params()
            layer.neurons.append(n.with_parameters(params[start:stop]))
            start = stop
        return layer

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """Stack of tanh layers; `linear_output` drops the tanh on the last one."""

    def __init__(self, nin: int, nouts: Sequence[int], linear_output: bool = False,
                 rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        sz = [nin] + list(nouts)
        self.layers = [
            Layer(sz[i], sz[i + 1],
                  nonlin=not (linear_output and i == len(nouts) - 1), rng=rng)
            for i in range(len(nouts))
        ]

    def __call__(self, x) -> List[Node]:
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def with_parameters(self, params: Sequence[Node]) -> "MLP":
        self._check_count(params)
        params = list(params)
        mlp = MLP.__new__(MLP)
        mlp.layers = []
        start = 0
        for layer in self.layers:
            stop = start + layer.n_params()
            mlp.layers.append(layer.with_parameters(params[start:stop]))
            start = stop
        return mlp

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
