# istm/i18n/store.py
"""
Process-wide dictionary store.

The YAML dictionary is read exactly once, under a lock, the first time any
caller needs it. Afterwards the data is frozen and read without locking.

A failed load is fatal: the error is raised to the first caller and re-raised
to every later caller, so lookups can never run against an empty dictionary.
"""
from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

import yaml

from istm.config.settings import settings

log = logging.getLogger(__name__)

Loader = Callable[[Path], Any]


class DictionaryLoadError(RuntimeError):
    """Dictionary source missing or malformed. Not recoverable."""


class DictYamlLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans: only true/false, never yes/no/on/off."""


DictYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DictYamlLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.load(f, Loader=DictYamlLoader)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


class DictionaryStore:
    def __init__(self, path: Optional[str | Path] = None, *, loader: Optional[Loader] = None):
        self._path = Path(path) if path is not None else settings.dict_path()
        self._loader = loader or _read_yaml
        self._lock = threading.Lock()
        self._loaded = False
        self._failure: Optional[DictionaryLoadError] = None
        self._data: Mapping[str, Any] = MappingProxyType({})
        self.load_count = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load the dictionary on first call; no-op afterwards.

        Concurrent callers block until the first load finishes.

        Raises:
            DictionaryLoadError: the source could not be opened or parsed.
                Raised again on every later call.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            if self._failure is not None:
                raise self._failure
            self.load_count += 1
            try:
                data = self._load()
            except DictionaryLoadError as e:
                self._failure = e
                log.critical("dict_load_failed", extra={"path": str(self._path), "reason": str(e)})
                raise
            self._data = data
            self._loaded = True
            log.info("dict_loaded", extra={"path": str(self._path), "keys": len(data)})

    def _load(self) -> Mapping[str, Any]:
        try:
            raw = self._loader(self._path)
        except OSError as e:
            raise DictionaryLoadError(f"failed to load {self._path}") from e
        except Exception as e:
            # yaml errors, bad utf-8, or anything an injected loader raises
            raise DictionaryLoadError(f"failed to decode {self._path}: {e}") from e
        if not isinstance(raw, Mapping):
            raise DictionaryLoadError(f"failed to decode {self._path}: top level is not a mapping")
        try:
            return _freeze(raw)
        except RecursionError as e:
            raise DictionaryLoadError(f"failed to decode {self._path}: recursive alias") from e

    @property
    def data(self) -> Mapping[str, Any]:
        self.ensure_loaded()
        return self._data


_default: Optional[DictionaryStore] = None
_default_lock = threading.Lock()


def get_store() -> DictionaryStore:
    """Return the process default store, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = DictionaryStore()
    return _default


def set_store(store: DictionaryStore) -> None:
    global _default
    with _default_lock:
        _default = store


def reset_store() -> None:
    global _default
    with _default_lock:
        _default = None


def ensure_loaded() -> None:
    get_store().ensure_loaded()


__all__ = [
    "DictionaryLoadError",
    "DictionaryStore",
    "get_store",
    "set_store",
    "reset_store",
    "ensure_loaded",
]
