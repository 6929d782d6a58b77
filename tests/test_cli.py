from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from scriptalias.cli import main
from scriptalias.settings import default_log_level


def _write_manifest(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {
                "aliases": [
                    {
                        "name": "CopyFile",
                        "return_type": "System.Void",
                        "declaring_type": "FileAliases",
                        "parameters": [
                            {"name": "context", "type": "ICakeContext"},
                            {"name": "source", "type": "Path"},
                            {"name": "dest", "type": "Path"},
                        ],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_gen_writes_aliases(tmp_path: Path):
    manifest = _write_manifest(tmp_path / "aliases.json")
    out = tmp_path / "aliases.cake"

    main(["gen", "--descriptors", str(manifest), "--out", str(out), "--jobs", "2", "--cache"])

    assert out.read_text(encoding="utf-8") == (
        "public void CopyFile(Path source, Path dest)\n"
        "{\n"
        "    FileAliases.CopyFile(Context, source, dest);\n"
        "}\n"
    )


def test_cli_gen_reports_missing_manifest(tmp_path: Path):
    with pytest.raises(SystemExit, match="not found"):
        main(["gen", "--descriptors", str(tmp_path / "nope.json"), "--out", str(tmp_path / "o.cake")])


def test_cli_gen_rejects_empty_manifest(tmp_path: Path):
    manifest = tmp_path / "empty.json"
    manifest.write_text('{"aliases": []}', encoding="utf-8")

    with pytest.raises(SystemExit, match="no usable aliases"):
        main(["gen", "--descriptors", str(manifest), "--out", str(tmp_path / "o.cake")])


def test_cli_version_prints_something(capsys: pytest.CaptureFixture[str]):
    main(["version"])
    assert capsys.readouterr().out.strip()


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit, match="unknown log level"):
        main(["--log-level", "chatty", "version"])


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SCRIPTALIAS_LOG_LEVEL", raising=False)
    assert default_log_level() == logging.WARNING

    monkeypatch.setenv("SCRIPTALIAS_LOG_LEVEL", "debug")
    assert default_log_level() == logging.DEBUG

    monkeypatch.setenv("SCRIPTALIAS_LOG_LEVEL", "nonsense")
    assert default_log_level() == logging.WARNING
