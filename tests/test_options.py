import pytest

from settingskit.options import (
    LoadError,
    SaveMethod,
    SettingOption,
    SignalArgs,
    Source,
)


@pytest.mark.parametrize(
    "bits, member",
    [
        (1 << 1, SettingOption.DO_NOT_WRITE_TO_JSON),
        (1 << 2, SettingOption.REMOTE),
        (1 << 3, SettingOption.COMPARE_BEFORE_SET),
        (0, SettingOption.DEFAULT),
    ],
)
def test_setting_option_from_bits(bits, member):
    assert SettingOption(bits) == member
    assert int(SettingOption(bits)) == bits


def test_setting_option_combination_from_bits():
    combined = SettingOption((1 << 2) | (1 << 3))
    assert combined == SettingOption.REMOTE | SettingOption.COMPARE_BEFORE_SET
    assert SettingOption.REMOTE in combined
    assert SettingOption.COMPARE_BEFORE_SET in combined
    assert SettingOption.DO_NOT_WRITE_TO_JSON not in combined
    assert combined & SettingOption.REMOTE == SettingOption.REMOTE
    assert combined & SettingOption.DO_NOT_WRITE_TO_JSON == SettingOption(0)


def test_save_method_all_the_time_from_bits():
    everything = SaveMethod((1 << 1) | (1 << 2))
    assert everything == SaveMethod.SAVE_ALL_THE_TIME
    assert everything == SaveMethod.SAVE_ON_EXIT | SaveMethod.SAVE_ON_SETTING_CHANGE
    assert everything & SaveMethod.SAVE_ON_EXIT
    assert everything & SaveMethod.SAVE_ON_SETTING_CHANGE


def test_save_manually_from_zero_has_no_flags():
    manual = SaveMethod(0)
    assert manual == SaveMethod.SAVE_MANUALLY
    assert not (manual & SaveMethod.SAVE_ON_EXIT)
    assert not (manual & SaveMethod.SAVE_ON_SETTING_CHANGE)


def test_signal_args_defaults():
    args = SignalArgs()
    assert args.source is Source.UNSET
    assert args.path == ""
    assert args.write_to_file is True
    assert args.compare_before_set is False


def test_signal_args_equality_and_fields():
    args = SignalArgs(source=Source.SETTER, path="/a/b")
    assert args == SignalArgs(source=Source.SETTER, path="/a/b")
    assert args.source is Source.SETTER
    assert args.path == "/a/b"


def test_load_error_round_trips_by_value():
    members = list(LoadError)
    assert members[0] is LoadError.NO_ERROR
    assert len(set(members)) == len(members)
    for member in members:
        assert LoadError(member.value) is member
    assert LoadError(LoadError.JSON_PARSE_ERROR.value) is LoadError.JSON_PARSE_ERROR