"""Tests for color helpers and palette configuration."""

import logging

import theme
from theme import color, is_hex_color, parse_env_file, resolve_hex


class TestPalette:
    """Test suite for palette overrides."""

    def test_is_hex_color(self):
        assert is_hex_color("#D7263D")
        assert is_hex_color("a7e399")
        assert not is_hex_color("#12345")
        assert not is_hex_color("red")

    def test_parse_env_file(self):
        """Test only known keys with valid hex values are kept."""
        text = "\n".join([
            "# palette",
            "ORGANIZER_HEADER = 112233",
            "ORGANIZER_IMPORTANT=#ff0000",
            "OTHER_KEY=#abcdef",
            "not a setting",
        ])
        assert parse_env_file(text) == {
            "ORGANIZER_HEADER": "#112233",
            "ORGANIZER_IMPORTANT": "#ff0000",
        }

    def test_parse_env_file_logs_bad_value(self, caplog):
        with caplog.at_level(logging.WARNING, logger="theme"):
            assert parse_env_file("ORGANIZER_IMPORTANT=crimson") == {}
        assert "ORGANIZER_IMPORTANT" in caplog.text

    def test_resolve_hex_priority(self, monkeypatch):
        """Test env var beats .env override, which beats the default."""
        overrides = {"ORGANIZER_HEADER": "#111111"}
        monkeypatch.delenv("ORGANIZER_HEADER", raising=False)
        assert resolve_hex("ORGANIZER_HEADER", "#000000", overrides) == "#111111"
        assert resolve_hex("ORGANIZER_HEADER", "#000000", {}) == "#000000"
        monkeypatch.setenv("ORGANIZER_HEADER", "222222")
        assert resolve_hex("ORGANIZER_HEADER", "#000000", overrides) == "#222222"

    def test_resolve_hex_ignores_bad_env(self, monkeypatch, caplog):
        monkeypatch.setenv("ORGANIZER_IMPORTANT", "nope")
        with caplog.at_level(logging.WARNING, logger="theme"):
            assert resolve_hex("ORGANIZER_IMPORTANT", "#D7263D", {}) == "#D7263D"
        assert "not a hex color" in caplog.text

    def test_color_disabled_returns_plain_text(self, monkeypatch):
        monkeypatch.setattr(theme, "_ENABLE", False)
        assert color("Work", "\033[1m") == "Work"

    def test_color_256_cube(self):
        assert theme._fg_256(255, 0, 0) == "\033[38;5;196m"
