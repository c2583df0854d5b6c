# istm/i18n/resolver.py
"""
Key path resolution against the loaded dictionary.

Lookups never raise. A missing key, a missing locale or a non-string leaf
yields a readable diagnostic string together with ``False``.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

from istm.config.settings import settings
from istm.i18n.nodes import NodeKind, node_kind
from istm.i18n.printf import sprintf
from istm.i18n.store import DictionaryStore, get_store

log = logging.getLogger(__name__)

ERROR_ROOT = ("dict", "error")


def format_keys(keys: Sequence[str]) -> str:
    """Render a key path as ``[dict error E1234]``."""
    return "[" + " ".join(str(k) for k in keys) + "]"


def error_keys(code: str) -> list[str]:
    return [*ERROR_ROOT, code]


class KeyResolver:
    def __init__(self, store: Optional[DictionaryStore] = None, locale: Optional[str] = None):
        self._store = store
        self.locale = locale or settings.LOCALE

    @property
    def store(self) -> DictionaryStore:
        return self._store or get_store()

    def _fail(self, keys: Sequence[str], text: str, reason: str) -> Tuple[str, bool]:
        log.warning("dict_resolve_failed", extra={"keys": list(keys), "reason": reason})
        return text, False

    def resolve(self, keys: Sequence[str], *args: Any) -> Tuple[str, bool]:
        """Resolve ``keys`` to the template for the current locale.

        With ``args`` the template is printf-formatted and the flag is always
        ``False``. Without ``args`` the raw template is returned with ``True``.
        """
        node = self.store.data
        for key in keys:
            if key not in node:
                return self._fail(keys, f"Invalid dict of '{format_keys(keys)}'", "key")
            value = node[key]
            # scalar values do not advance traversal
            if node_kind(value) is NodeKind.BRANCH:
                node = value

        if self.locale not in node:
            return self._fail(keys, f"Invalid locale for '{format_keys(keys)}': {self.locale}", "locale")
        template = node[self.locale]
        if node_kind(template) is not NodeKind.TEXT:
            return self._fail(keys, f"Invalid type for '{format_keys(keys)}': {self.locale}", "type")
        if args:
            return sprintf(template, args), False
        return template, True


_default: Optional[KeyResolver] = None


def default_resolver() -> KeyResolver:
    global _default
    if _default is None:
        _default = KeyResolver()
    return _default


def get_dict(keys: Sequence[str], *args: Any) -> Tuple[str, bool]:
    """Resolve a key path with the process default store and locale."""
    return default_resolver().resolve(keys, *args)


__all__ = ["KeyResolver", "format_keys", "error_keys", "default_resolver", "get_dict", "ERROR_ROOT"]
