import os
import sys
import textwrap

import pytest

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)


SAMPLE_DICT = textwrap.dedent(
    """
    dict:
      word:
        sbom-form-name:
          jp: "名前"
          en: "Name"
        no-jp:
          en: "English only"
        not-text:
          jp: 42
      error:
        E1234:
          jp: テストエラー
          en: the test error
        E1235:
          jp: "'%s'の型が不正です"
          en: "'%s' is invalid type"
        E1236:
          jp: "'%s'の数値が不正です: %d"
          en: "The number of '%s' is invalid: %d"
        E1237:
          en: "english only"
    """
).strip()


@pytest.fixture(autouse=True)
def _reset_default_store():
    from istm.i18n import resolver, store

    store.reset_store()
    resolver._default = None
    yield
    store.reset_store()
    resolver._default = None


@pytest.fixture
def dict_file(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(SAMPLE_DICT, encoding="utf-8")
    return p


@pytest.fixture
def store(dict_file):
    from istm.i18n.store import DictionaryStore, set_store

    s = DictionaryStore(dict_file)
    set_store(s)
    return s


@pytest.fixture
def resolver(store):
    from istm.i18n.resolver import KeyResolver

    return KeyResolver(store, "jp")
