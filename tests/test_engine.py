import logging
import math

import numpy as np
import pytest
from scipy.optimize import approx_fprime

from scalar_aad import (
    GradientStore, backward, constant, add, sub, mul, div, pow, sqrt, exp, tanh, relu,
)


@pytest.fixture
def neuron():
    """Two-input tanh neuron with known gradients."""
    x1 = constant(2.0, label="x1")
    x2 = constant(0.0, label="x2")
    w1 = constant(-3.0, label="w1")
    w2 = constant(1.0, label="w2")
    b = constant(6.8813735870195432, label="b")
    n = x1 * w1 + x2 * w2 + b
    o = tanh(n, label="o")
    return dict(x1=x1, x2=x2, w1=w1, w2=w2, b=b, n=n, o=o)


def test_additive_gradient_splitting():
    a = constant(3.0, label="a")
    c = a + a
    store = backward(c)
    assert store.get(a) == 2.0


def test_product_rule():
    a, b = constant(3.0), constant(-4.0)
    store = backward(a * b)
    assert store.get(a) == b.value
    assert store.get(b) == a.value


def test_chain_rule_through_tanh_at_zero():
    a = constant(0.0)
    store = backward(tanh(a))
    assert store.get(a) == 1.0


def test_root_gradient_is_one():
    a = constant(5.0)
    c = exp(a)
    assert backward(c).get(c) == 1.0
    assert backward(a).get(a) == 1.0


def test_worked_neuron_example(neuron):
    store = backward(neuron["o"])
    assert neuron["o"].value == pytest.approx(0.7071, abs=1e-4)
    assert store.get(neuron["n"]) == pytest.approx(0.5)
    assert store.get(neuron["x1"]) == pytest.approx(-1.5)
    assert store.get(neuron["w1"]) == pytest.approx(1.0)
    assert store.get(neuron["x2"]) == pytest.approx(0.5)
    assert store.get(neuron["w2"]) == pytest.approx(0.0)
    assert store.get(neuron["b"]) == pytest.approx(0.5)


def test_tanh_built_from_exp_matches_primitive(neuron):
    n = neuron["n"]
    e = exp(2.0 * n)
    o = (e - 1.0) / (e + 1.0)
    store = backward(o)
    assert o.value == pytest.approx(neuron["o"].value)
    assert store.get(neuron["x1"]) == pytest.approx(-1.5)
    assert store.get(neuron["w1"]) == pytest.approx(1.0)


def test_diamond_accumulates_all_consumers():
    a = constant(3.0)
    b = a * a        # db/da = 2a
    c = b + a        # dc/da = 2a + 1
    store = backward(c)
    assert store.get(a) == pytest.approx(7.0)
    assert store.get(b) == pytest.approx(1.0)


def test_unused_leaf_reads_zero():
    a, b = constant(1.0), constant(2.0)
    unused = constant(42.0)
    store = backward(a * b)
    assert unused not in store
    assert store.get(unused) == 0.0


def test_same_label_nodes_keep_separate_gradients():
    a = constant(2.0, label="w")
    b = constant(5.0, label="w")
    c, d = constant(7.0), constant(11.0)   # both unlabeled
    store = backward(a * b + c * d)
    assert store.get(a) == 5.0
    assert store.get(b) == 2.0
    assert store.get(c) == 11.0
    assert store.get(d) == 7.0


@pytest.mark.parametrize("x, expected", [(2.0, 1.0), (-2.0, 0.0), (0.0, 0.0)])
def test_relu_gradient(x, expected):
    a = constant(x)
    assert backward(relu(a)).get(a) == expected


def test_exp_gradient():
    a = constant(1.5)
    assert backward(exp(a)).get(a) == pytest.approx(math.exp(1.5))


def test_pow_differentiates_base_only():
    x = constant(3.0)
    e = constant(2.0)
    y = pow(x, e)
    store = backward(y)
    assert store.get(x) == pytest.approx(6.0)
    assert e.id not in store
    assert store.get(e) == 0.0


def test_computed_exponent_subtree_stays_out_of_store():
    w, z = constant(0.5), constant(3.0)
    y = pow(constant(2.0), w * z)
    store = backward(y)
    assert w.id not in store
    assert z.id not in store
    assert store.get(w) == 0.0
    assert len(store) == 2


def test_overflowing_exponent_does_not_poison_shared_leaf():
    x = constant(1000.0)
    # exp(x) overflows to inf; its partial is inf as well
    y = pow(constant(1.0), exp(x)) + x
    g = backward(y).get(x)
    assert math.isfinite(g)
    assert g == 1.0


def test_derived_operations_gradients():
    a, b = constant(6.0), constant(4.0)
    store = backward(sub(a, b))
    assert store.get(a) == pytest.approx(1.0)
    assert store.get(b) == pytest.approx(-1.0)

    store = backward(div(a, b))
    assert store.get(a) == pytest.approx(1.0 / 4.0)
    assert store.get(b) == pytest.approx(-6.0 / 16.0)

    store = backward(-a)
    assert store.get(a) == pytest.approx(-1.0)

    store = backward(sqrt(b))
    assert store.get(b) == pytest.approx(0.25)


def _expression(v):
    x, y, z = v
    return tanh(x * y + exp(z / 3.0)) * relu(y) - (x ** 2) / (z + 4.0) + sqrt(y * y + 1.0)


def test_matches_finite_differences():
    point = np.array([0.3, 1.7, -0.8])

    leaves = [constant(float(v)) for v in point]
    out = _expression(leaves)
    store = backward(out)
    analytic = np.array([store.get(n) for n in leaves])

    numeric = approx_fprime(point, lambda p: _expression([constant(float(v)) for v in p]).value,
                            1e-7)
    np.testing.assert_allclose(analytic, numeric, rtol=1e-4, atol=1e-6)


def test_deep_chain_backward():
    x = constant(1.0)
    y = x
    for _ in range(5000):
        y = y * 1.0 + 0.0
    assert backward(y).get(x) == pytest.approx(1.0)


def test_backward_does_not_touch_graph(neuron):
    o = neuron["o"]
    before = [(n.value, n.provenance) for n in neuron.values()]
    backward(o)
    backward(o)
    assert [(n.value, n.provenance) for n in neuron.values()] == before


def test_repeated_backward_gives_independent_stores(neuron):
    first = backward(neuron["o"])
    second = backward(neuron["o"])
    assert first is not second
    assert dict(first) == dict(second)


def test_non_finite_values_propagate_without_raising():
    z = constant(0.0)
    q = div(constant(1.0), z)
    store = backward(q)
    assert math.isinf(store.get(z)) or math.isnan(store.get(z))


def test_gradient_store_mapping_interface():
    a, b = constant(2.0), constant(3.0)
    c = a * b
    store = backward(c)
    assert isinstance(store, GradientStore)
    assert store[a] == 3.0
    assert store[a.id] == 3.0
    assert store.get(a.id) == 3.0
    assert set(store) == {a.id, b.id, c.id}
    assert len(store) == 3
    with pytest.raises(KeyError):
        store[constant(0.0)]
    with pytest.raises(TypeError):
        store.get("a")
    with pytest.raises(TypeError):
        store[a] = 10.0


def test_backward_rejects_non_nodes():
    with pytest.raises(TypeError):
        backward(3.0)


def test_backward_logs_graph_size(caplog):
    a = constant(1.0)
    with caplog.at_level(logging.DEBUG, logger="scalar_aad.engine"):
        backward(a * 2.0 + 1.0)
    assert any("backward:" in r.getMessage() for r in caplog.records)
