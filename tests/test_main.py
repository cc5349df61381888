import io
import logging

import pytest

from metric_output import main as entrypoint


@pytest.fixture
def stdin(monkeypatch):
    def feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed


def test_prints_record_in_configured_format(monkeypatch, stdin, capsys) -> None:
    monkeypatch.setattr(entrypoint, "METRIC_FORMAT", "statsd")
    stdin('{"metric_name": "myapp.requests", "value": 1, "statsd_type": "c"}')
    entrypoint.main()
    assert capsys.readouterr().out == "myapp.requests:1|c\n"


def test_default_format_is_graphite(monkeypatch, stdin, capsys) -> None:
    monkeypatch.setattr(entrypoint, "METRIC_FORMAT", "graphite")
    stdin('{"metric_name": "load.avg", "value": 1.23, "timestamp": 1700000000}')
    entrypoint.main()
    assert capsys.readouterr().out == "load.avg 1.23 1700000000\n"


def test_invalid_json_is_logged(stdin, capsys, caplog) -> None:
    stdin("not json")
    with caplog.at_level(logging.ERROR, logger="metric_output.main"):
        entrypoint.main()
    assert capsys.readouterr().out == ""
    assert "not valid JSON" in caplog.text


def test_invalid_record_is_logged(monkeypatch, stdin, capsys, caplog) -> None:
    monkeypatch.setattr(entrypoint, "METRIC_FORMAT", "graphite")
    stdin('["load", 1]')
    with caplog.at_level(logging.ERROR, logger="metric_output.main"):
        entrypoint.main()
    assert capsys.readouterr().out == ""
    assert "must be a mapping" in caplog.text


def test_unknown_configured_format_is_logged(monkeypatch, stdin, capsys, caplog) -> None:
    monkeypatch.setattr(entrypoint, "METRIC_FORMAT", "prometheus")
    stdin('{"metric_name": "load", "value": 1}')
    with caplog.at_level(logging.ERROR, logger="metric_output.main"):
        entrypoint.main()
    assert capsys.readouterr().out == ""
    assert "prometheus" in caplog.text
    assert "configuration" in caplog.text


def test_scalar_tags_are_logged(monkeypatch, stdin, capsys, caplog) -> None:
    monkeypatch.setattr(entrypoint, "METRIC_FORMAT", "graphite")
    stdin('{"metric_name": "x", "value": 1, "tags": 5}')
    with caplog.at_level(logging.ERROR, logger="metric_output.main"):
        entrypoint.main()
    assert capsys.readouterr().out == ""
    assert "Invalid metric record" in caplog.text
    assert "tags must be" in caplog.text
