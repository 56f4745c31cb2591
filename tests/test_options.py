import pytest

from portable_dialogs.options import Button, Choice, FileDialogKind, Icon, Opt


def test_button_values_follow_declaration_order():
    assert Button(-1) is Button.CANCEL
    assert Button(0) is Button.OK
    assert [Button(v) for v in range(-1, 6)] == list(Button)


def test_button_from_int():
    assert Button(2) is Button.NO
    with pytest.raises(ValueError):
        Button(42)


def test_choice_ok_is_zero_and_ordered():
    assert Choice(0) is Choice.OK
    assert [Choice(v) for v in range(len(Choice))] == list(Choice)
    with pytest.raises(ValueError):
        Choice(len(Choice))


def test_icon_ordering():
    assert Icon(0) is Icon.INFO
    assert [Icon(v) for v in range(4)] == [
        Icon.INFO,
        Icon.WARNING,
        Icon.ERROR,
        Icon.QUESTION,
    ]


def test_opt_flag_values():
    assert Opt(0x1) is Opt.MULTISELECT
    assert Opt(0x2) is Opt.FORCE_OVERWRITE
    assert Opt(0x4) is Opt.FORCE_PATH


def test_opt_none_is_falsy():
    assert not Opt.NONE
    assert Opt(0) == Opt.NONE


def test_opt_combination():
    combined = Opt(0x1 | 0x4)
    assert combined == Opt.MULTISELECT | Opt.FORCE_PATH
    assert Opt.MULTISELECT in combined
    assert Opt.FORCE_PATH in combined
    assert not (combined & Opt.FORCE_OVERWRITE)
    assert combined & Opt.MULTISELECT


@pytest.mark.parametrize("flag", [Opt.MULTISELECT, Opt.FORCE_OVERWRITE, Opt.FORCE_PATH])
def test_opt_or_with_none_is_identity(flag):
    assert flag | Opt.NONE == flag


def test_file_dialog_kinds_are_distinct():
    kinds = list(FileDialogKind)
    assert len(kinds) == 3
    assert len({k.value for k in kinds}) == 3
    assert FileDialogKind("folder") is FileDialogKind.FOLDER