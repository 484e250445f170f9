"""
Operator set, operator overloading, dispatch table and configuration tests.
"""

import math

import numpy as np
import pytest

import memograph as mg
from memograph import ops


@pytest.mark.parametrize("builder, args, expected", [
    (ops.add, (1.5, 2.25), 3.75),
    (ops.sub, (1.5, 2.25), -0.75),
    (ops.mul, (1.5, 2.0), 3.0),
    (ops.div, (3.0, 2.0), 1.5),
    (ops.pow, (3.0, 3.0), 27.0),
    (ops.pow, (4.0, -0.5), 0.5),
    (ops.neg, (2.0,), -2.0),
    (ops.sin, (math.pi / 2,), 1.0),
    (ops.cos, (0.0,), 1.0),
    (ops.exp, (0.0,), 1.0),
    (ops.log, (math.e,), 1.0),
    (ops.sqrt, (9.0,), 3.0),
    (ops.erf, (0.0,), 0.0),
])
def test_builtin_operators(builder, args, expected):
    node = builder(*args)
    assert node.compute() == pytest.approx(expected, abs=1e-6)


def test_erf_matches_scipy():
    from scipy.special import erf
    node = ops.erf(0.5)
    assert node.compute() == pytest.approx(erf(0.5), rel=1e-6)


def test_operator_overloading_builds_nodes():
    x = mg.create_input(2.0)
    y = mg.create_input(3.0)
    expr = 1 + x * y - x / 4 + (-y) ** 2 + 2 ** x

    assert isinstance(expr, mg.BinaryNode)
    assert not expr.is_cached
    # 1 + 6 - 0.5 + 9 + 4
    assert expr.compute() == pytest.approx(19.5)

    y.set(1.0)
    # 1 + 2 - 0.5 + 1 + 4
    assert expr.compute() == pytest.approx(7.5)


def test_numpy_scalar_on_the_left_builds_a_node():
    x = mg.create_input(2.0)
    expr = np.float32(3.0) * x
    assert isinstance(expr, mg.Node)
    assert expr.compute() == np.float32(6.0)


def test_float_conversion_computes():
    x = mg.create_input(0.25)
    assert float(ops.sqrt(x)) == 0.5


def test_register_custom_operator():
    op = mg.register_operator("hypot", 2, np.hypot)
    try:
        assert mg.get_operator("hypot") is op
        node = mg.create_binary("hypot", mg.create_input(3.0), mg.create_input(4.0))
        assert node.compute() == np.float32(5.0)
        assert node.op_tag == "hypot"
    finally:
        mg.unregister_operator("hypot")

    with pytest.raises(mg.UnknownOperatorError):
        mg.get_operator("hypot")


def test_register_rejects_duplicates_and_bad_arity():
    with pytest.raises(ValueError):
        mg.register_operator("add", 2, lambda a, b: a + b)
    with pytest.raises(ValueError):
        mg.register_operator("fma", 3, lambda a, b, c: a * b + c)

    original = mg.get_operator("sin")
    try:
        replaced = mg.register_operator("sin", 1, np.sin, replace=True)
        assert mg.get_operator("sin") is replaced
    finally:
        mg.register_operator("sin", 1, original.fn, replace=True)


def test_operator_apply_checks_arity():
    with pytest.raises(mg.ArityError):
        mg.get_operator("add").apply(np.float32(1.0))


def test_use_config_changes_dtype_temporarily():
    with mg.use_config(dtype=np.float64) as config:
        assert config.dtype is np.float64
        x = mg.create_input(0.1)
        assert isinstance(x.value, np.float64)
        assert isinstance(ops.sin(x).compute(), np.float64)
    assert mg.get_config().dtype is np.float32
    assert isinstance(mg.create_input(0.1).value, np.float32)


def test_dtype_change_recomputes_cached_nodes():
    x = mg.create_input(0.1)
    s = ops.sin(x)
    single = s.compute()
    assert isinstance(single, np.float32)

    with mg.use_config(dtype=np.float64):
        assert isinstance(x.compute(), np.float64)
        double = s.compute()
        assert isinstance(double, np.float64)
        assert double == np.sin(np.float64(np.float32(0.1)))
        assert s.compute() is double

    back = s.compute()
    assert isinstance(back, np.float32)
    assert back == single


def test_fp_errors_raise_policy():
    node = ops.log(mg.create_input(-1.0))
    with mg.use_config(fp_errors="raise"):
        with pytest.raises(FloatingPointError):
            node.compute()
    # Failed evaluation leaves the cache empty
    assert not node.is_cached
    assert np.isnan(node.compute())


def test_get_logger_uses_config_level():
    import logging
    with mg.use_config(log_level=logging.DEBUG):
        logger = mg.get_logger("memograph.test_ops")
    assert logger.level == logging.DEBUG
    assert logger.handlers
    # Second call reuses the handlers
    again = mg.get_logger("memograph.test_ops", level=logging.INFO)
    assert again is logger and len(again.handlers) == 1
    assert again.level == logging.INFO
