import pytest

from clbuilder.app_version import AppVersion, AppVersionParseError


def test_parse_simple_version():
    assert AppVersion.parse("1.2.3") == AppVersion(1, 2, 3)


def test_display_round_trip():
    for version in (AppVersion(), AppVersion(0, 1, 0), AppVersion(10, 20, 30)):
        assert AppVersion.parse(str(version)) == version


def test_default_is_all_zero():
    version = AppVersion()
    assert (version.major, version.minor, version.patch) == (0, 0, 0)


def test_display_format():
    assert str(AppVersion(4, 5, 6)) == "4.5.6"


def test_ordering():
    assert AppVersion(1, 0, 0) > AppVersion(0, 9, 9)
    assert AppVersion(1, 2, 0) > AppVersion(1, 1, 9)
    assert AppVersion(1, 1, 2) > AppVersion(1, 1, 1)
    assert AppVersion(1, 1, 1) <= AppVersion(1, 1, 1)
    assert not AppVersion(1, 1, 1) < AppVersion(1, 1, 1)
    assert sorted([AppVersion(2, 0, 0), AppVersion(0, 0, 1), AppVersion(1, 0, 0)]) == [
        AppVersion(0, 0, 1),
        AppVersion(1, 0, 0),
        AppVersion(2, 0, 0),
    ]


@pytest.mark.parametrize("text", ["", "1", "1.2"])
def test_too_few_parts(text):
    with pytest.raises(AppVersionParseError):
        AppVersion.parse(text)


@pytest.mark.parametrize("text", ["a.b.c", "1.x.3", "1.2.", "-1.0.0", "1. 2.3"])
def test_bad_numbers(text):
    with pytest.raises(AppVersionParseError) as info:
        AppVersion.parse(text)
    assert isinstance(info.value.__cause__, ValueError)


def test_number_too_large():
    with pytest.raises(AppVersionParseError):
        AppVersion.parse("4294967296.0.0")


def test_largest_number_accepted():
    assert AppVersion.parse("4294967295.0.0").major == 4294967295


def test_extra_parts_ignored():
    assert AppVersion.parse("1.2.3.4") == AppVersion(1, 2, 3)


def test_leading_plus_accepted():
    assert AppVersion.parse("+1.2.3") == AppVersion(1, 2, 3)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        AppVersion.parse("1.2")


def test_constructor_rejects_negative():
    with pytest.raises(ValueError):
        AppVersion(-1, 0, 0)