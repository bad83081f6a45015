import json

import pytest

from talent import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)


def test_cli_prints_records_as_json(tmp_path, capsys, stub_readers, sample_cv_text):
    stub_readers(native=sample_cv_text)
    cv = tmp_path / "budi.pdf"
    cv.write_bytes(b"%PDF-fake")

    exit_code = cli.main([str(cv), "--compact"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload[0]["file"] == str(cv)
    assert payload[0]["record"]["email"] == "budi.santoso@gmail.com"
    assert payload[0]["record"]["experience"][0]["company"] == "Acme Corp"


def test_cli_reports_failures_and_exit_status(tmp_path, capsys, stub_readers, sample_cv_text):
    stub_readers(native=lambda content: sample_cv_text if content else "", ocr="")
    good = tmp_path / "good.pdf"
    good.write_bytes(b"%PDF-fake")
    missing = tmp_path / "missing.pdf"

    exit_code = cli.main([str(good), str(missing), "--concurrency", "1"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert "record" in payload[0]
    assert payload[1] == {"file": str(missing), "error": "no text recoverable"}


def test_build_parser_defaults():
    args = cli.build_parser().parse_args(["cv.pdf"])
    assert args.concurrency == 4
    assert args.timeout is None
    assert args.compact is False


@pytest.mark.parametrize("value", ["0", "-2"])
def test_build_parser_rejects_non_positive_concurrency(value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.build_parser().parse_args(["cv.pdf", "--concurrency", value])
    assert exc_info.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err
