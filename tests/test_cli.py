from pathlib import Path

import pytest

from bulk.server import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["9000"],
        ["9000", "0"],
        ["9000", "-3"],
        ["9000", "abc"],
        ["0", "3"],
        ["70000", "3"],
    ],
)
def test_bad_arguments_print_usage(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code != 0
    captured = capsys.readouterr()
    assert "usage: bulk_server" in captured.err
    assert captured.out == ""


def test_parse_config_defaults() -> None:
    config = cli.parse_config(["9000", "5"])
    assert config.port == 9000
    assert config.bulk_size == 5
    assert config.host == "0.0.0.0"
    assert config.log_dir is None
    assert config.log_level == "WARNING"
    assert config.terminate_on_disconnect is False


def test_parse_config_options(tmp_path) -> None:
    config = cli.parse_config(
        [
            "9000",
            "2",
            "--host",
            "127.0.0.1",
            "--log-dir",
            str(tmp_path),
            "--log-level",
            "debug",
            "--terminate-on-disconnect",
        ]
    )
    assert config.host == "127.0.0.1"
    assert config.log_dir == Path(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.terminate_on_disconnect is True


def test_main_returns_zero_on_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _interrupted(config) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "serve", _interrupted)
    assert cli.main(["9000", "3"]) == 0


def test_main_reports_bind_failure(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    async def _address_in_use(config) -> None:
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(cli, "serve", _address_in_use)
    assert cli.main(["9000", "3"]) == 1
    assert "Address already in use" in caplog.text
