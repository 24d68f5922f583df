import pytest

from hanawire.modes import ALL_MODES, DEFAULT_MODE, Mode, parse_mode


@pytest.mark.parametrize(
    "name, mode",
    [
        ("normal", Mode.NORMAL),
        ("proxy", Mode.PROXY),
        ("diff-normal", Mode.DIFF_NORMAL),
        ("diff-proxy", Mode.DIFF_PROXY),
    ],
)
def test_parse_known_modes(name, mode):
    assert parse_mode(name) is mode
    assert str(mode) == name


def test_parse_mode_passes_mode_through():
    assert parse_mode(Mode.DIFF_PROXY) is Mode.DIFF_PROXY


def test_default_is_first_mode():
    assert parse_mode("normal") is DEFAULT_MODE
    assert parse_mode(str(DEFAULT_MODE)) is ALL_MODES[0]
    assert [parse_mode(name) for name in ("normal", "proxy", "diff-normal", "diff-proxy")] == list(ALL_MODES)


@pytest.mark.parametrize("name", ["", "Normal", "diff", "bogus"])
def test_parse_unknown_mode_raises(name):
    with pytest.raises(ValueError, match="Unknown mode") as info:
        parse_mode(name)
    assert f'"{name}"' in str(info.value)


def test_round_trip_every_mode():
    assert [parse_mode(str(mode)) for mode in ALL_MODES] == list(ALL_MODES)


def test_normal_mode_behaviour():
    mode = parse_mode("normal")
    assert mode.handles_locally is True
    assert mode.uses_proxy is False
    assert mode.diffs is False
    assert mode.replies_from_proxy is False


def test_proxy_mode_behaviour():
    mode = parse_mode("proxy")
    assert mode.handles_locally is False
    assert mode.uses_proxy is True
    assert mode.diffs is False
    assert mode.replies_from_proxy is True


def test_diff_modes_behaviour():
    diff_normal = parse_mode("diff-normal")
    diff_proxy = parse_mode("diff-proxy")
    for mode in (diff_normal, diff_proxy):
        assert mode.handles_locally is True
        assert mode.uses_proxy is True
        assert mode.diffs is True
    assert diff_normal.replies_from_proxy is False
    assert diff_proxy.replies_from_proxy is True