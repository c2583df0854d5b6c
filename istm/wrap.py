# istm/wrap.py
"""
Error decoration: tag an error with a category prefix and the wrap-site stack.

The original error is kept untouched and reachable through ``unwrap()`` and
``__cause__``.
"""
from __future__ import annotations

import traceback
from typing import Optional

RUNTIME_ERROR = "runtime_error"


class WrappedError(Exception):
    def __init__(self, err: BaseException, prefix: str = "", stack: Optional[traceback.StackSummary] = None):
        self.err = err
        self.prefix = prefix
        self.stack = stack if stack is not None else traceback.StackSummary()
        super().__init__(str(self))
        self.__cause__ = err

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}: {self.err}"
        return str(self.err)

    def unwrap(self) -> BaseException:
        return self.err


def wrap_prefix(err: BaseException, prefix: str, skip: int = 0) -> WrappedError:
    """Wrap ``err`` with ``prefix``; ``skip`` drops that many extra caller frames."""
    stack = traceback.extract_stack()[: -(skip + 1)]
    return WrappedError(err, prefix, traceback.StackSummary.from_list(stack))


def runtime_error_wrapper(err: BaseException) -> WrappedError:
    return wrap_prefix(err, RUNTIME_ERROR, 1)


def error_stack(err: BaseException) -> str:
    """Render the wrap-site stack, or an empty string for undecorated errors."""
    if isinstance(err, WrappedError):
        return "".join(err.stack.format())
    return ""


__all__ = ["RUNTIME_ERROR", "WrappedError", "wrap_prefix", "runtime_error_wrapper", "error_stack"]
