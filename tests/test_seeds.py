import pytest

from scalar_aad import constant, grad, grads, grads_list, tanh, value


def test_value_passthrough():
    assert value(constant(2.5)) == 2.5
    assert value(3.0) == 3.0


def test_grad_single_input():
    assert grad(lambda x: x * x * x, 2.0) == pytest.approx(12.0)
    assert grad(lambda x: tanh(x), 0.0) == pytest.approx(1.0)


def test_grads_dict_keeps_key_order():
    out = grads(lambda v: v["a"] * v["b"] + v["a"], {"b": 5.0, "a": 2.0})
    assert list(out) == ["b", "a"]
    assert out["a"] == pytest.approx(6.0)
    assert out["b"] == pytest.approx(2.0)


def test_grads_list():
    f = lambda xs: xs[0] * xs[0] + 3 * xs[1]
    assert grads_list(f, [2.0, 4.0]) == pytest.approx([4.0, 3.0])


def test_unused_input_gets_zero():
    out = grads(lambda v: v["a"] * 2.0, {"a": 1.0, "unused": 7.0})
    assert out["unused"] == 0.0


def test_constant_output_gives_zero_gradients():
    assert grads(lambda v: 3.0, {"a": 1.0}) == {"a": 0.0}
    assert grads_list(lambda xs: 1, [1.0, 2.0]) == [0.0, 0.0]
    assert grad(lambda x: 5.0, 1.0) == 0.0


def test_non_numeric_output_is_rejected():
    with pytest.raises(TypeError):
        grad(lambda x: "oops", 1.0)
    with pytest.raises(TypeError):
        grads(lambda v: None, {"a": 1.0})
