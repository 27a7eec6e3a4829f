import json
import logging

from infrastructure.todoist_api.commands import make_command


def test_envelope_is_single_command_list():
    payload = json.loads(make_command("item_move", {"id": 1, "project_id": 2}))
    assert isinstance(payload, list) and len(payload) == 1
    command = payload[0]
    assert command["type"] == "item_move"
    assert command["args"] == {"id": 1, "project_id": 2}
    assert command["uuid"] and command["temp_id"]
    assert command["uuid"] != command["temp_id"]


def test_each_envelope_gets_fresh_ids():
    first = json.loads(make_command("item_move", {"id": 1}))[0]
    second = json.loads(make_command("item_move", {"id": 1}))[0]
    assert first["uuid"] != second["uuid"]


def test_unencodable_args_degrade_to_empty_string(caplog):
    with caplog.at_level(logging.WARNING, logger="todoist.api"):
        assert make_command("item_move", {"id": object()}) == ""
    assert "item_move" in caplog.text
