from __future__ import annotations

from pathlib import Path

import pytest

from filedup import __version__, cli


def _write(path: Path, content: bytes = b"") -> None:
    path.write_bytes(content)


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "File deduplicator" in out
    assert "--filetype" in out
    assert "--dir" in out


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_filetype_without_dot(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--dir", str(tmp_path), "--filetype", "pdf"]) == 1
    assert "must start with a dot" in capsys.readouterr().err


def test_nonexistent_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--dir", str(tmp_path / "missing")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_file_instead_of_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    file_path = tmp_path / "test.txt"
    _write(file_path)

    assert cli.main(["--dir", str(file_path)]) == 1
    assert "not a directory" in capsys.readouterr().err


def test_invalid_thread_count(tmp_path: Path) -> None:
    assert cli.main(["--dir", str(tmp_path), "--max-threads", "-2"]) == 1


def test_empty_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--dir", str(tmp_path), "--filetype", ".pdf"]) == 0

    out = capsys.readouterr().out
    assert "# Scanning for files" in out
    assert "# Processing 0 .pdf files" in out


def test_counts_only_matching_extension(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write(tmp_path / "archive1.zip")
    _write(tmp_path / "archive2.zip")
    _write(tmp_path / "document.pdf")

    assert cli.main(["--dir", str(tmp_path), "--filetype", ".zip"]) == 0
    assert "Processing 2 .zip files" in capsys.readouterr().out


def test_filetype_from_environment(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEDUP_FILETYPE", ".zip")
    _write(tmp_path / "archive1.zip")

    assert cli.main(["--dir", str(tmp_path)]) == 0
    assert "Processing 1 .zip files" in capsys.readouterr().out


def test_prints_plan(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    base = tmp_path / "document.pdf"
    dup = tmp_path / "document (1).pdf"
    _write(base, b"same content")
    _write(dup, b"same content")

    assert cli.main(["--dir", str(tmp_path), "--filetype", ".pdf", "--max-threads", "2"]) == 0

    out = capsys.readouterr().out
    assert "Processing 2 .pdf files" in out
    assert f"# {'-' * 30} {base} " in out
    assert f'rm "{dup}" # {base}' in out
    assert "mv " not in out


def test_unreadable_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    base = tmp_path / "document.pdf"
    dup = tmp_path / "document (1).pdf"
    _write(base, b"a")
    _write(dup, b"b")

    def unreadable(self, path: str) -> str:
        raise PermissionError(f"Permission denied: {path}")

    monkeypatch.setattr(cli.FileHasher, "checksum", unreadable)

    assert cli.main(["--dir", str(tmp_path), "--filetype", ".pdf"]) == 1

    captured = capsys.readouterr()
    assert "Failed to hash" in captured.err
    assert "rm " not in captured.out


def test_non_numeric_thread_count_from_environment(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEDUP_MAX_THREADS", "many")

    assert cli.main(["--dir", str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert "Invalid configuration" in captured.err
    assert "# Scanning" not in captured.out


def test_thread_count_from_environment(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEDUP_MAX_THREADS", "2")
    _write(tmp_path / "doc.pdf", b"x")
    _write(tmp_path / "doc (1).pdf", b"x")

    assert cli.main(["--dir", str(tmp_path)]) == 0
    assert f'rm "{tmp_path / "doc (1).pdf"}"' in capsys.readouterr().out
