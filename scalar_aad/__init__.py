# scalar_aad/__init__.py
# Scalar reverse-mode automatic differentiation with a small MLP on top

from .aad import (
    Node,
    NodeId,
    GradientStore,
    topological_order,
    backward,
    grad,
    grads,
    grads_list,
    value,
    constant,
    add, sub, mul, div, neg, pow, sqrt,
    exp, tanh, relu,
)
from . import nn

__all__ = [
    'Node', 'NodeId', 'GradientStore',
    'topological_order', 'backward',
    'grad', 'grads', 'grads_list', 'value',
    'constant',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'sqrt',
    'exp', 'tanh', 'relu',
    'nn',
]
