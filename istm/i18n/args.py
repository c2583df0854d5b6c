from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from istm.i18n.resolver import KeyResolver, default_resolver

KEY_SEP = "."


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class DictRef:
    """A string argument naming a dictionary path, e.g. ``dict.word.name``."""

    path: str

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self.path.split(KEY_SEP))


Arg = Union[Literal, DictRef]


def classify_arg(arg: Any) -> Arg:
    if isinstance(arg, str) and KEY_SEP in arg:
        return DictRef(arg)
    return Literal(arg)


def resolve_arg(arg: Any, resolver: KeyResolver) -> Any:
    kind = classify_arg(arg)
    if isinstance(kind, DictRef):
        text, ok = resolver.resolve(kind.keys)
        # keep the caller's string when the lookup fails
        return text if ok else kind.path
    return kind.value


def preprocess_args(args: Sequence[Any], resolver: Optional[KeyResolver] = None) -> List[Any]:
    resolver = resolver or default_resolver()
    return [resolve_arg(a, resolver) for a in args]


__all__ = ["Literal", "DictRef", "Arg", "classify_arg", "resolve_arg", "preprocess_args", "KEY_SEP"]
