"""
istm/cli/istmctl.py

CLI: istmctl error <CODE> [ARG...] [--wrap]
     istmctl dict <KEY.PATH> [ARG...]
"""
import argparse
import logging
import sys

from istm.errors import new_istm_error, unwrap
from istm.i18n.resolver import KeyResolver
from istm.i18n.store import DictionaryLoadError, DictionaryStore
from istm.wrap import error_stack, runtime_error_wrapper


def _coerce(raw: str):
    for conv in (int, float):
        try:
            return conv(raw)
        except ValueError:
            continue
    return raw


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="istmctl", description="Localized error dictionary")
    ap.add_argument("--dict", dest="dict_path", default=None, help="Path to dictionary YAML")
    ap.add_argument("--locale", default=None, help="Locale key (default: ISTM_LOCALE or jp)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    e = sub.add_parser("error", help="Render the message for an error code")
    e.add_argument("code")
    e.add_argument("args", nargs="*")
    e.add_argument("--wrap", action="store_true", help="Also show the runtime_error wrapped form")

    d = sub.add_parser("dict", help="Resolve a dotted dictionary path")
    d.add_argument("path")
    d.add_argument("args", nargs="*")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )

    store = DictionaryStore(args.dict_path) if args.dict_path else None
    resolver = KeyResolver(store, args.locale)
    fmt_args = [_coerce(a) for a in args.args]

    try:
        resolver.store.ensure_loaded()
    except DictionaryLoadError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if args.cmd == "error":
        err = new_istm_error(args.code, *fmt_args, resolver=resolver)
        print(err)
        if args.wrap:
            wrapped = runtime_error_wrapper(err)
            print(unwrap(wrapped))
            print(wrapped)
            if args.verbose:
                print(error_stack(wrapped), end="")
        return 0

    text, ok = resolver.resolve(args.path.split("."), *fmt_args)
    print(text)
    if not ok and not fmt_args:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
