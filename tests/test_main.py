"""End-to-end tests for the sigcheck entry point."""
import logging
import os
from pathlib import Path

import pytest

from sigcheck.core.config import Settings
from sigcheck.main import main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    app_log = logging.getLogger("sigcheck")
    for handler in list(app_log.handlers):
        app_log.removeHandler(handler)


@pytest.fixture
def config(tmp_path: Path) -> Settings:
    root = tmp_path / "example"
    root.mkdir()
    (root / "a.png").write_bytes(b"\x89\x50\x4e\x47\x0d\x0a\x1a\x0a")
    (root / "b.png").write_bytes(b"\x00\x00\x00\x00")
    (root / "noext").write_bytes(b"\x00")

    rules = tmp_path / "extensions.txt"
    rules.write_text("89 50 4E 47 : png\n", encoding="utf-8")

    return Settings(
        SCAN_ROOT=root,
        REPORT_PATH=tmp_path / "output.txt",
        SIGNATURES_PATH=rules,
    )


def test_settings_defaults() -> None:
    defaults = Settings(_env_file=None)
    assert defaults.SCAN_ROOT == Path("./example")
    assert defaults.REPORT_PATH == Path("output.txt")
    assert defaults.SIGNATURES_PATH == Path("extensions.txt")
    assert defaults.HEADER_SIZE == 20


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIGCHECK_HEADER_SIZE", "32")
    monkeypatch.setenv("SIGCHECK_TRIM_EXTENSIONS", "false")
    loaded = Settings(_env_file=None)
    assert loaded.HEADER_SIZE == 32
    assert loaded.TRIM_EXTENSIONS is False


def test_main_writes_report(config: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(config) == 0

    assert capsys.readouterr().out == "Program completed successfully\n"
    assert config.REPORT_PATH.read_text(encoding="utf-8") == (
        f"Mismatching extensions\n{config.SCAN_ROOT / 'b.png'}\n"
    )


def test_main_bad_rule_file(config: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    config.SIGNATURES_PATH.write_text("89 50 4E 47 png\n", encoding="utf-8")

    assert main(config) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Program failed with error:" in captured.err
    assert not config.REPORT_PATH.exists()


def test_main_missing_rule_file(config: Settings) -> None:
    config.SIGNATURES_PATH.unlink()
    assert main(config) == 1


def test_main_missing_scan_root(tmp_path: Path, config: Settings) -> None:
    missing = config.model_copy(update={"SCAN_ROOT": tmp_path / "gone"})
    assert main(missing) == 1


def test_main_unwritable_report(tmp_path: Path, config: Settings) -> None:
    unwritable = config.model_copy(
        update={"REPORT_PATH": tmp_path / "no-such-dir" / "output.txt"}
    )
    assert main(unwritable) == 1


def test_main_reports_undecodable_filename(config: Settings) -> None:
    bad_name = os.fsdecode(b"bad\xff.png")
    try:
        (config.SCAN_ROOT / bad_name).write_bytes(b"\x00\x00\x00\x00")
    except (OSError, UnicodeError):
        pytest.skip("filesystem rejects non-UTF-8 filenames")

    assert main(config) == 0

    written = config.REPORT_PATH.read_bytes()
    assert os.fsencode(config.SCAN_ROOT / bad_name) + b"\n" in written
    assert os.fsencode(config.SCAN_ROOT / "b.png") + b"\n" in written


def test_main_invalid_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SIGCHECK_HEADER_SIZE", "0")

    assert main() == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Program failed with error: invalid settings" in captured.err
