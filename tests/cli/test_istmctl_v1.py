"""istmctl command line."""
from __future__ import annotations

from istm.cli.istmctl import main


def test_error_command(dict_file, capsys):
    rc = main(["--dict", str(dict_file), "error", "E1236", "dict.word.sbom-form-name", "2"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "'名前'の数値が不正です: 2"


def test_error_command_wrap(dict_file, capsys):
    rc = main(["--dict", str(dict_file), "error", "E1234", "--wrap"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["テストエラー", "テストエラー", "runtime_error: テストエラー"]


def test_error_command_locale(dict_file, capsys):
    main(["--dict", str(dict_file), "--locale", "en", "error", "E1236", "x", "1.5"])
    assert capsys.readouterr().out.strip() == "The number of 'x' is invalid: %!d(float=1.5)"


def test_dict_command(dict_file, capsys):
    assert main(["--dict", str(dict_file), "dict", "dict.word.sbom-form-name"]) == 0
    assert capsys.readouterr().out.strip() == "名前"


def test_dict_command_failure(dict_file, capsys):
    assert main(["--dict", str(dict_file), "dict", "dict.word.nope"]) == 1
    assert capsys.readouterr().out.strip() == "Invalid dict of '[dict word nope]'"


def test_missing_dictionary(tmp_path, capsys):
    rc = main(["--dict", str(tmp_path / "missing.yaml"), "error", "E1234"])
    assert rc == 2
    assert "[ERROR] failed to load" in capsys.readouterr().err
