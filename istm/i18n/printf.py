"""
Best-effort printf-style formatting for dictionary templates.

Templates are authored for positional ``%s`` / ``%d`` substitution. A
mismatch between the placeholders and the supplied arguments never raises;
the problem is written into the output instead:

    %!d(MISSING)            placeholder without an argument
    %!d(str=abc)            argument of the wrong type
    %!z(int=1)              unknown verb
    %!(EXTRA str=a, int=1)  arguments left over
    %!(NOVERB)              template ends with a bare '%'
"""
from __future__ import annotations

import json
import re
from typing import Any, Sequence

_DIRECTIVE = re.compile(r"%(?P<flags>[-+ #0]*)(?P<width>\d+)?(?:\.(?P<prec>\d+))?(?P<verb>.|$)", re.S)

_INT_VERBS = frozenset("dioxXc")
_FLOAT_VERBS = frozenset("eEfFgG")


def _describe(arg: Any) -> str:
    return f"{type(arg).__name__}={arg}"


def _bad(verb: str, arg: Any) -> str:
    return f"%!{verb}({_describe(arg)})"


def _render(head: str, verb: str, arg: Any) -> str:
    if verb == "v":
        return (head + "s") % (arg,)
    if verb == "s":
        # only text and errors render as %s
        if isinstance(arg, bytes):
            arg = arg.decode("utf-8", errors="replace")
        if not isinstance(arg, (str, BaseException)):
            return _bad(verb, arg)
        return (head + "s") % (arg,)
    if verb == "q":
        return (head + "s") % (json.dumps(str(arg), ensure_ascii=False),)
    if verb == "r":
        return (head + "r") % (arg,)
    if verb in _INT_VERBS:
        if isinstance(arg, bool) or not isinstance(arg, int):
            return _bad(verb, arg)
    elif verb in _FLOAT_VERBS:
        if isinstance(arg, bool) or not isinstance(arg, (int, float)):
            return _bad(verb, arg)
    else:
        return _bad(verb, arg)
    try:
        return (head + verb) % (arg,)
    except (TypeError, ValueError, OverflowError):
        return _bad(verb, arg)


def sprintf(template: str, args: Sequence[Any]) -> str:
    out = []
    pos = 0
    used = 0
    for m in _DIRECTIVE.finditer(template):
        out.append(template[pos:m.start()])
        pos = m.end()
        verb = m.group("verb")
        if verb == "%":
            out.append("%")
            continue
        if not verb:
            out.append("%!(NOVERB)")
            continue
        if used >= len(args):
            out.append(f"%!{verb}(MISSING)")
            continue
        arg = args[used]
        used += 1
        out.append(_render(m.group(0)[:-1], verb, arg))
    out.append(template[pos:])
    if used < len(args):
        out.append("%!(EXTRA " + ", ".join(_describe(a) for a in args[used:]) + ")")
    return "".join(out)


__all__ = ["sprintf"]
