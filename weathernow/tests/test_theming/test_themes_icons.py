"""Tests for the theme table and icon lookup."""

from weathernow.models.theme import ClassificationKey, IconId, Theme
from weathernow.theming.icons import CONDITIONS, UNKNOWN_CONDITION, icon_for
from weathernow.theming.themes import THEMES, theme_for


class TestThemes:
    def test_every_key_has_theme(self):
        for key in ClassificationKey:
            assert isinstance(theme_for(key), Theme)

    def test_table_is_closed(self):
        assert set(THEMES) == set(ClassificationKey)

    def test_night_theme_is_dark(self):
        assert "slate-900" in theme_for(ClassificationKey.NIGHT).background_style

    def test_themes_are_distinct(self):
        backgrounds = {t.background_style for t in THEMES.values()}
        assert len(backgrounds) == len(ClassificationKey)


class TestIcons:
    def test_known_code(self):
        cond = icon_for(95)
        assert cond.icon == IconId.THUNDERSTORM
        assert cond.label == "Thunderstorm"

    def test_snow_code(self):
        assert icon_for(71).icon == IconId.SNOW

    def test_unknown_code_falls_back(self):
        assert icon_for(12345) is UNKNOWN_CONDITION
        assert icon_for(-1).icon == IconId.UNKNOWN

    def test_fallback_is_not_in_table(self):
        assert UNKNOWN_CONDITION not in CONDITIONS.values()

    def test_every_classified_code_has_icon(self):
        for code in (0, 1, 2, 3, 45, 48, 61, 71, 80, 95, 96, 99):
            assert icon_for(code) is not UNKNOWN_CONDITION
