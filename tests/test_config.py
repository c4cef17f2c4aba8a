"""Machine table loading tests."""
import json

import pytest

from fsm_graphviz import (
    ConfigError,
    GraphOptions,
    MemorySink,
    StateMachineAdapter,
    TransitionAdapter,
    load_machines,
    parse_machines,
)
from fsm_graphviz.config import override_options


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_machines_list(tmp_path, door_records):
    path = _write(tmp_path / "machines.json", {"machines": [
        {"name": "Door", "options": {"directed": True, "stateShape": "ellipse"},
         "transitions": door_records},
        {"name": "Pair", "adapter": "tuple", "transitions": [["A", "GO", "B"]]},
    ]})
    door, pair = load_machines(path)

    assert door.name == "Door"
    assert isinstance(door.adapter, StateMachineAdapter)
    assert door.options == GraphOptions(name="Door", directed=True, state_shape="ellipse")
    assert pair.options.name == "Pair"
    assert pair.adapter.adapt()[0].event == "GO"


def test_top_level_list_is_accepted():
    machines = parse_machines([{"name": "A", "transitions": []}, {"name": "B", "transitions": []}])
    assert [m.name for m in machines] == ["A", "B"]


def test_single_fsm_document_named_after_file(tmp_path):
    path = _write(tmp_path / "TCP_state_machine.json", {
        "states": ["CLOSED", "LISTEN"],
        "initial_state": "CLOSED",
        "final_states": ["CLOSED"],
        "transitions": [
            {"from": "CLOSED", "event": "passive OPEN", "action": "create TCB", "to": "LISTEN"},
            {"from": "LISTEN", "requisite": "CLOSE", "actions": ["delete TCB"], "to": "CLOSED"},
        ],
    })
    (machine,) = load_machines(path)
    assert machine.name == "TCP_state_machine"
    assert isinstance(machine.adapter, TransitionAdapter)
    assert [e.event for e in machine.adapter.adapt()] == ["passive OPEN", "CLOSE"]


def test_option_name_overrides_machine_name():
    (machine,) = parse_machines({"machines": [
        {"name": "Door", "options": {"name": "FrontDoor"}, "transitions": []}]})
    assert machine.name == "Door"
    assert machine.options.name == "FrontDoor"


def test_machine_builds_emitter(door_records):
    (machine,) = parse_machines([{"name": "Door", "transitions": door_records}])
    sink = MemorySink()
    machine.emitter(sink).create_graph()
    assert sink.documents["Door"].startswith("graph Door {")


@pytest.mark.parametrize("data, message", [
    ({"machines": {"name": "x"}}, "list of machines"),
    ([42], "must be an object"),
    ([{"name": "A"}], "transitions"),
    ([{"name": "", "transitions": []}], "non-empty"),
    ([{"name": "A", "adapter": "xml", "transitions": []}], "unknown adapter"),
    ([{"name": "A", "options": {"shape": "box"}, "transitions": []}], "unknown graph option"),
    ([{"name": "A", "options": {"directed": "yes"}, "transitions": []}], "directed"),
    ([{"name": "A", "options": {"style": "fancy"}, "transitions": []}], "style"),
    ([{"name": "A", "options": "box", "transitions": []}], "options"),
    ([{"name": "A", "options": {"stateShape": 5}, "transitions": []}], "state_shape"),
    ([{"name": "A", "options": {"fontname": None}, "transitions": []}], "fontname"),
    ([{"name": "A", "options": {"stateFillcolor": 2}, "transitions": []}], "state_fillcolor"),
    ([{"name": "A", "options": {"name": 7}, "transitions": []}], "'name' must be a string"),
    ([{"name": "../A", "transitions": []}], "must not be a path"),
])
def test_malformed_tables(data, message):
    with pytest.raises(ConfigError, match=message):
        parse_machines(data)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid JSON"):
        load_machines(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read"):
        load_machines(tmp_path / "nope.json")


def test_override_options_only_applies_given_values():
    machines = parse_machines([{"name": "A", "options": {"directed": True}, "transitions": []}])
    (same,) = override_options(machines, style=None, directed=None)
    assert same.options.directed is True
    (compact,) = override_options(machines, style="compact", directed=None)
    assert compact.options.style == "compact"
    assert compact.options.directed is True
    assert machines[0].options.style == "styled"
