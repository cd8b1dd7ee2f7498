"""
Gradient-descent training for the scalar MLP.

Each step rebuilds the whole graph from the current parameter leaves, runs
one reverse pass, and produces brand-new parameter leaves

    p_new = p - learning_rate · ∂loss/∂p

so no node is ever mutated.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..aad.core.engine import backward
from ..aad.core.gradients import GradientStore
from ..aad.core.node import Node
from ..aad.ops import constant
from ..logger import get_logger
from .modules import Module

logger = get_logger("scalar_aad.nn")


@dataclass
class TrainConfig:
    """Configuration for gradient-descent training."""
    learning_rate: float = 0.05
    steps: int = 20

    # Logging
    verbose: bool = False


def sum_squared_error(predictions: Sequence, targets: Sequence) -> Node:
    """Σ (pred - target)²; predictions and targets may be Nodes or numbers."""
    if len(predictions) != len(targets):
        raise ValueError(
            f"got {len(predictions)} predictions for {len(targets)} targets"
        )
    loss = constant(0.0, label="loss")
    for yp, y in zip(predictions, targets):
        loss = loss + (yp - y) ** 2
    return loss


def sgd_step(parameters: Sequence[Node], store: GradientStore,
             learning_rate: float) -> List[Node]:
    """New leaves p - learning_rate * grad(p); the old leaves are left as they are."""
    return [constant(p.value - learning_rate * store.get(p), label=p.label)
            for p in parameters]


def _predict(model: Module, x) -> Node:
    out = model(x)
    if not isinstance(out, list):
        return out
    if len(out) != 1:
        raise ValueError(f"fit() trains single-output models, got {len(out)} outputs")
    return out[0]


def fit(model: Module, xs: Sequence[Sequence], ys: Sequence,
        config: Optional[TrainConfig] = None) -> Dict:
    """
    Train `model` (single output) on (xs, ys) with plain gradient descent.

    Returns:
        {'model': trained module, 'loss_history': [float, ...], 'steps': int}
    """
    config = config or TrainConfig()
    if len(xs) != len(ys):
        raise ValueError(f"got {len(xs)} inputs for {len(ys)} targets")

    if config.verbose:
        print(f"\nTraining {type(model).__name__}...")
        print(f"  Samples: {len(xs)}")
        print(f"  Parameters: {model.n_params()}")

    loss_history: List[float] = []
    for step in range(config.steps):
        ypred = [_predict(model, x) for x in xs]
        loss = sum_squared_error(ypred, ys)
        store = backward(loss)

        params = model.parameters()
        model = model.with_parameters(sgd_step(params, store, config.learning_rate))

        loss_history.append(loss.value)
        logger.debug("step %d: loss=%.6e", step, loss.value)
        if config.verbose:
            print(f"  Step {step}: Loss = {loss.value:.6e}")

    if config.verbose and loss_history:
        print(f"\nTraining Complete:")
        print(f"  Final loss: {loss_history[-1]:.6e}")

    return {
        'model': model,
        'loss_history': loss_history,
        'steps': config.steps,
    }
