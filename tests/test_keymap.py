from application.commands import Command, CommandKind
from interface.keymap import KEYMAP


def test_every_command_kind_has_a_key():
    bound = {command.kind for command in KEYMAP.values()}
    assert bound == set(CommandKind)


def test_classic_keys():
    assert KEYMAP["?"].kind is CommandKind.HELP
    assert KEYMAP["v"] == KEYMAP["enter"] == Command(CommandKind.DETAIL)
    assert KEYMAP["C"].kind is CommandKind.CLOSE
    assert KEYMAP["D"].kind is CommandKind.DELETE
    assert KEYMAP["d"].kind is CommandKind.EDIT_DUE
    assert KEYMAP["q"].kind is CommandKind.QUIT


def test_number_keys_carry_display_level():
    for level in range(1, 5):
        assert KEYMAP[str(level)] == Command(CommandKind.SET_PRIORITY, level)
