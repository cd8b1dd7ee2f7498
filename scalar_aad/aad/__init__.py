# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Node, NodeId
from .core.gradients import GradientStore
from .core.topo import topological_order
from .core.engine import backward
from .core.seeds import grad, grads, grads_list, value
from .ops import constant, add, sub, mul, div, neg, pow, sqrt, exp, tanh, relu

__all__ = [
    # Core
    'Node',
    'NodeId',
    'GradientStore',
    'topological_order',
    'backward',
    'grad',
    'grads',
    'grads_list',
    'value',
    # Graph builder
    'constant',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'sqrt',
    'exp', 'tanh', 'relu',
]
