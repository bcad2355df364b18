import logging

import numpy as np

from isotile import AffineTransform
from isotile.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_safe_repr_summarizes_arrays_and_transforms():
    assert _safe_repr(np.zeros((0, 2))) == "ndarray(shape=(0, 2), dtype=float64)"
    big = _safe_repr(np.arange(100.0))
    assert "min=0" in big and "max=99" in big
    assert _safe_repr(AffineTransform()) == "Affine[1, 0, 0, 0, 1, 0]"
    assert _safe_repr(list(range(10))).endswith("... 4 more]")


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("isotile.tests.trace")

    @debug_log_call(logger)
    def double(x):
        return 2 * x

    with caplog.at_level(logging.DEBUG, logger="isotile.tests.trace"):
        assert double(4) == 8
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering") and "double" in m for m in messages)
    assert any(m.endswith("-> 8") for m in messages)
    assert debug_log_call(logger)(double) is double


def test_apply_debug_logging_wraps_local_callables():
    def local():
        return 1

    local.__module__ = "fake_module"

    class Thing:
        def method(self):
            return 2

    Thing.__module__ = "fake_module"
    Thing.method.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "local": local, "Thing": Thing, "np": np}
    apply_debug_logging(namespace)
    assert getattr(namespace["local"], "_debug_logging_wrapped", False)
    assert getattr(Thing.method, "_debug_logging_wrapped", False)
    assert namespace["np"] is np
    assert namespace["local"]() == 1
    assert Thing().method() == 2
