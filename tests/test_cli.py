"""
Tests for the fileops command line entry point.
"""

import os

import pytest

from fileops import cli
from fileops.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv("FILEOPS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FILEOPS_LANGUAGE", raising=False)
    monkeypatch.setattr("fileops.config.settings.load_dotenv", lambda: False)
    reset_settings()
    yield
    reset_settings()


def test_copy_subcommand(tmp_path, capsys):
    (tmp_path / "data.txt").write_text("hello")

    code = cli.main(["--cwd", str(tmp_path), "copy", "data.txt", "out"])

    assert code == 0
    assert (tmp_path / "out" / "data.txt").read_text() == "hello"
    assert "File copied successfully" in capsys.readouterr().out


def test_copy_subcommand_failure(tmp_path, capsys):
    code = cli.main(["--cwd", str(tmp_path), "copy", "missing.txt", "out"])

    assert code == 1
    assert "Source file does not exist" in capsys.readouterr().err


def test_copy_target_with_spaces_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--cwd", str(tmp_path), "copy", "a.txt", "my dir"])

    assert exc.value.code == 2


def test_ls_subcommand(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("0123456789")

    code = cli.main(["--cwd", str(tmp_path), "ls"])

    assert code == 0
    assert "a.txt" in capsys.readouterr().out


def test_ls_missing_directory(tmp_path, capsys):
    code = cli.main(["--cwd", str(tmp_path), "ls", "nope"])

    assert code == 1
    assert "Directory does not exist" in capsys.readouterr().err


def test_lang_option(tmp_path, capsys):
    (tmp_path / "b").mkdir()

    cli.main(["--cwd", str(tmp_path), "--lang", "ru", "ls"])

    assert "Папка" in capsys.readouterr().out


def test_language_from_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("FILEOPS_LANGUAGE", "ru")
    (tmp_path / "a.txt").write_text("x")

    cli.main(["--cwd", str(tmp_path), "ls"])

    assert "Файл" in capsys.readouterr().out


def test_invalid_configuration(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("FILEOPS_LOG_LEVEL", "chatty")

    code = cli.main(["--cwd", str(tmp_path), "ls"])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_default_is_interactive_shell(tmp_path, monkeypatch):
    (tmp_path / "data.txt").write_text("hello")
    lines = iter(["copy data.txt out"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert cli.main(["--cwd", str(tmp_path)]) == 0
    assert os.path.exists(tmp_path / "out" / "data.txt")


def test_each_invocation_gets_its_own_container(tmp_path, capsys):
    (tmp_path / "b").mkdir()

    cli.main(["--cwd", str(tmp_path), "--lang", "ru", "ls"])
    russian = capsys.readouterr().out
    cli.main(["--cwd", str(tmp_path), "--lang", "en", "ls"])
    english = capsys.readouterr().out

    assert "Папка" in russian and "Folder" not in russian
    assert "Folder" in english and "Папка" not in english
