import json
import time

from metric_output.models.field import Error
from metric_output.renderers.json_object import JSONRenderer


def test_mapping_with_timestamp_is_serialised_compactly() -> None:
    line = JSONRenderer().format(
        {"metric_name": "load", "value": 1.23, "timestamp": 1700000000, "tags": []}
    )
    assert line == '{"metric_name":"load","value":1.23,"timestamp":1700000000,"tags":[]}'


def test_missing_timestamp_is_injected(fixed_now) -> None:
    line = JSONRenderer().format({"metric_name": "load", "value": 1})
    assert json.loads(line) == {"metric_name": "load", "value": 1, "timestamp": fixed_now}


def test_null_or_false_timestamp_is_replaced(fixed_now) -> None:
    for timestamp in (None, False):
        line = JSONRenderer().format({"metric_name": "load", "timestamp": timestamp})
        assert json.loads(line)["timestamp"] == fixed_now


def test_zero_and_empty_timestamps_are_kept(fixed_now) -> None:
    for timestamp in (0, ""):
        line = JSONRenderer().format({"metric_name": "load", "timestamp": timestamp})
        assert json.loads(line)["timestamp"] == timestamp


def test_input_mapping_is_not_mutated() -> None:
    obj = {"metric_name": "load", "value": 1}
    JSONRenderer().format(obj)
    assert obj == {"metric_name": "load", "value": 1}


def test_reserialisation_only_changes_timestamp(monkeypatch) -> None:
    obj = {"metric_name": "load", "value": 1, "tags": [["env", "prod"]]}
    monkeypatch.setattr(time, "time", lambda: 100.0)
    first = json.loads(JSONRenderer().format(obj))
    monkeypatch.setattr(time, "time", lambda: 200.0)
    second = json.loads(JSONRenderer().format(obj))
    assert (first.pop("timestamp"), second.pop("timestamp")) == (100, 200)
    assert first == second


def test_strings_and_errors_print_verbatim(capsys) -> None:
    renderer = JSONRenderer()
    renderer.render("CheckJSON OK")
    renderer.render(RuntimeError("boom"))
    renderer.render(Error("already wrapped"))
    assert capsys.readouterr().out == "CheckJSON OK\nboom\nalready wrapped\n"


def test_other_shapes_are_dropped(capsys) -> None:
    renderer = JSONRenderer()
    for obj in (None, 42, 1.5, ["a", 1], ("a", 1)):
        assert renderer.render(obj) is None
    assert capsys.readouterr().out == ""
