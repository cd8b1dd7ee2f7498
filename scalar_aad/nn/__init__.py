"""
Neural-network package built on the scalar AAD engine.

Provides:
1. Neuron / Layer / MLP: tanh perceptrons with immutable parameter leaves
2. sum_squared_error: loss over a batch of predictions
3. sgd_step / fit: gradient-descent training, TrainConfig for its settings
"""

from .modules import Module, Neuron, Layer, MLP
from .train import TrainConfig, sum_squared_error, sgd_step, fit

__all__ = [
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    'TrainConfig',
    'sum_squared_error',
    'sgd_step',
    'fit',
]
