"""Tests for group settings and parsed line models."""

import pytest

from regx import GroupSettings, Raw, Sections, describe


def test_group_settings_defaults_are_absent():
    settings = GroupSettings()
    assert settings.padding_before is None
    assert settings.padding_after is None


def test_group_settings_rejects_negative_padding():
    with pytest.raises(ValueError):
        GroupSettings(padding_after=-1)
    with pytest.raises(ValueError):
        GroupSettings(padding_before=-2)


@pytest.mark.parametrize(
    "text, before, after",
    [
        (":", None, None),
        ("", None, None),
        (":1", None, 1),
        ("2:", 2, None),
        ("0:3", 0, 3),
        ("1", None, 1),
    ],
)
def test_group_settings_parse(text, before, after):
    assert GroupSettings.parse(text) == GroupSettings(before, after)


@pytest.mark.parametrize("text", ["x:1", "1:y", "-1:", "1:2:3"])
def test_group_settings_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        GroupSettings.parse(text)


def test_describe():
    assert describe(Raw("plain line")) == "plain line"
    assert describe(Sections(("a ", "= 1"))) == "a |= 1"


def test_sections_column_count():
    assert Sections(("a", "b", "c")).column_count == 3
    assert Sections(()).column_count == 0
