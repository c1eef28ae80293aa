"""Unit tests for theme module."""

# pyright: reportPrivateUsage=false

import re
from unittest.mock import patch

import cmvn.core.theme as theme_module
import pytest
from cmvn.core.theme import ThemeColors, get_rich_theme, get_theme
from rich.theme import Theme

# Every markup tag and style= argument the CLI emits
_USED_STYLES = ("muted", "info", "success", "warning", "error", "path", "bold_header", "border")


class TestThemeColors:
    """Tests for ThemeColors model."""

    def test_frozen(self) -> None:
        """Colors cannot be changed after construction."""
        colors = ThemeColors()

        with pytest.raises(ValueError):
            colors.path = "#000000"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Unknown colors are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(removed="#ffffff")  # type: ignore[call-arg]

    def test_defaults_are_hex(self) -> None:
        """Default colors are #RRGGBB codes."""
        for value in ThemeColors().model_dump().values():
            assert re.fullmatch(r"#[0-9a-fA-F]{6}", value)


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_defines_used_styles(self) -> None:
        """The theme carries one style per tag the CLI prints."""
        theme = get_rich_theme()

        assert isinstance(theme, Theme)
        for name in _USED_STYLES:
            assert name in theme.styles

    def test_custom_colors_applied(self) -> None:
        """Passed colors end up in the styles."""
        theme = get_rich_theme(ThemeColors(path="#123456"))

        assert theme.styles["path"].color is not None
        assert theme.styles["path"].color.triplet is not None
        assert theme.styles["path"].color.triplet.hex == "#123456"

    def test_error_is_bold(self) -> None:
        """Errors stand out in bold."""
        assert get_rich_theme().styles["error"].bold is True

    def test_get_theme_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()

        assert first is second
