from istm.errors import IstmError, find_in_chain, iter_chain, new_istm_error, unwrap
from istm.i18n.resolver import KeyResolver, get_dict
from istm.i18n.store import DictionaryLoadError, DictionaryStore, ensure_loaded
from istm.wrap import RUNTIME_ERROR, WrappedError, runtime_error_wrapper, wrap_prefix

__all__ = [
    "IstmError",
    "new_istm_error",
    "unwrap",
    "iter_chain",
    "find_in_chain",
    "KeyResolver",
    "get_dict",
    "DictionaryStore",
    "DictionaryLoadError",
    "ensure_loaded",
    "RUNTIME_ERROR",
    "WrappedError",
    "wrap_prefix",
    "runtime_error_wrapper",
]
