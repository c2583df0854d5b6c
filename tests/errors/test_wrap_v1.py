"""runtime_error decoration."""
from __future__ import annotations

from istm.wrap import RUNTIME_ERROR, WrappedError, error_stack, runtime_error_wrapper, wrap_prefix


def _call_site(err):
    return runtime_error_wrapper(err)


def test_prefix_and_message():
    err = ValueError("boom")
    w = runtime_error_wrapper(err)
    assert isinstance(w, WrappedError)
    assert w.prefix == RUNTIME_ERROR
    assert str(w) == "runtime_error: boom"
    assert w.unwrap() is err
    assert w.__cause__ is err
    assert str(err) == "boom"


def test_empty_prefix_keeps_message():
    assert str(wrap_prefix(ValueError("boom"), "")) == "boom"


def test_stack_points_at_caller():
    w = _call_site(ValueError("boom"))
    assert w.stack[-1].name == "_call_site"
    assert "_call_site" in error_stack(w)


def test_error_stack_of_plain_error():
    assert error_stack(ValueError("x")) == ""
