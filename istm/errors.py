# istm/errors.py
"""
IstmError: an error whose message is built from an error code via the
localized dictionary.

Dictionary definition::

    dict:
      word:
        sbom-form-name:
          jp: "名前"
          en: "Name"
      error:
        E1234:
          jp: テストエラー
          en: the test error
        E1236:
          jp: "'%s'の数値が不正です: %d"
          en: "The number of '%s' is invalid: %d"

Usage::

    err = new_istm_error("E1234")
    # string arguments containing '.' are looked up in the dictionary
    err = new_istm_error("E1236", "dict.word.sbom-form-name", 2)
    # plain arguments are used as they are
    err = new_istm_error("E1236", "名前", 2)

    str(err)           # localized message
    unwrap(wrapped)    # the IstmError inside a wrapped chain, or `wrapped`
"""
from __future__ import annotations

from typing import Any, Iterator, Optional, Type, TypeVar

from istm.i18n.args import preprocess_args
from istm.i18n.resolver import KeyResolver, default_resolver, error_keys

E = TypeVar("E", bound=BaseException)


class IstmError(Exception):
    """Localized error. Only the rendered message is kept."""

    def __init__(self, message: str):
        self._message = message
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"IstmError({self._message!r})"


def render_message(code: str, *args: Any, resolver: Optional[KeyResolver] = None) -> str:
    resolver = resolver or default_resolver()
    conv = preprocess_args(args, resolver)
    # the diagnostic text is kept as the message so bad codes show up early
    text, _ = resolver.resolve(error_keys(code), *conv)
    return text


def new_istm_error(code: str, *args: Any, resolver: Optional[KeyResolver] = None) -> IstmError:
    return IstmError(render_message(code, *args, resolver=resolver))


def iter_chain(err: BaseException) -> Iterator[BaseException]:
    """Walk ``err`` and everything it wraps, depth first, each error once.

    Followed links: ``unwrap()`` of decorators, ``__cause__``, ``__context__``
    (unless suppressed) and the members of exception groups.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        cur = stack.pop()
        if cur is None or id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        nxt = []
        unwrap_fn = getattr(cur, "unwrap", None)
        if callable(unwrap_fn):
            try:
                nxt.append(unwrap_fn())
            except TypeError:
                # foreign unwrap() with a different signature
                pass
        nxt.append(cur.__cause__)
        if not cur.__suppress_context__:
            nxt.append(cur.__context__)
        if isinstance(cur, BaseExceptionGroup):
            nxt.extend(cur.exceptions)
        stack.extend(e for e in reversed(nxt) if isinstance(e, BaseException))


def find_in_chain(err: BaseException, kind: Type[E]) -> Optional[E]:
    for e in iter_chain(err):
        if isinstance(e, kind):
            return e
    return None


def unwrap(err: BaseException) -> BaseException:
    """Return the IstmError inside ``err``'s chain, or ``err`` unchanged."""
    found = find_in_chain(err, IstmError)
    return found if found is not None else err


__all__ = ["IstmError", "new_istm_error", "render_message", "iter_chain", "find_in_chain", "unwrap"]
