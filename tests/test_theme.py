"""
Unit tests for theme derivation and dark mode state.

Tests cover:
- Hex parsing and the lighten mix
- Full palette derivation in light and dark mode
- Tenant-level dark mode availability
- DarkModeController transitions
"""

import pytest
from structlog.testing import capture_logs

from schooltree_brand.defaults import DEFAULT_COLORS
from schooltree_brand.models import BrandColors, DarkModeState
from schooltree_brand.normalizer import normalize
from schooltree_brand.theme import (
    BACKGROUND_DARK,
    BORDER,
    BORDER_DARK,
    SUBJECT_COLORS,
    SURFACE_DARK,
    TEXT_DARK,
    TEXT_MUTED,
    DarkModeController,
    _round_half_up,
    derive_colors,
    lighten_color,
    parse_hex,
    tenant_colors,
)

DARK_OVERRIDDEN = {"background", "surface", "text", "textSecondary", "border"}


@pytest.fixture
def base_colors() -> BrandColors:
    return BrandColors.model_validate(DEFAULT_COLORS)


# =============================================================================
# Color math
# =============================================================================


class TestParseHex:
    def test_six_digit(self):
        assert parse_hex("#137fec") == (0x13, 0x7F, 0xEC)

    def test_without_hash(self):
        assert parse_hex("137fec") == (0x13, 0x7F, 0xEC)

    def test_three_digit(self):
        assert parse_hex("#fa0") == (0xFF, 0xAA, 0x00)

    @pytest.mark.parametrize("value", ["", "#12", "#12345", "not-a-color", "#gggggg"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_hex(value)


class TestRoundHalfUp:
    """Matches JavaScript Math.round, including values just below a half."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.5, 3),
            (128.5, 129),
            (0.49999999999999994, 0),
            (254.49999999999997, 254),
            (-0.5, 0),
            (-1.5, -1),
            (7.0, 7),
        ],
    )
    def test_rounding(self, value, expected):
        assert _round_half_up(value) == expected


class TestLightenColor:
    """Each channel moves toward 255 by the given fraction."""

    def test_zero_percent_is_identity(self):
        assert lighten_color("#137fec", 0.0) == "#137fec"

    def test_full_percent_is_white(self):
        assert lighten_color("#137fec", 1.0) == "#ffffff"

    def test_output_is_lowercase(self):
        assert lighten_color("#ABCDEF", 0.0) == "#abcdef"

    def test_halves_round_up(self):
        # 2 + 253 * 0.5 = 128.5
        assert lighten_color("#020202", 0.5) == "#818181"

    def test_black_halfway(self):
        # 0 + 255 * 0.5 = 127.5
        assert lighten_color("#000000", 0.5) == "#808080"

    def test_short_form_input(self):
        assert lighten_color("#000", 1.0) == "#ffffff"

    def test_out_of_range_percent_is_clamped(self):
        assert lighten_color("#137fec", 2.0) == "#ffffff"
        assert lighten_color("#808080", -2.0) == "#000000"

    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#10b981", "#dbf5ec"),
            ("#ef4444", "#fde3e3"),
            ("#f59e0b", "#fef0da"),
            ("#3b82f6", "#e2ecfe"),
        ],
    )
    def test_status_tints(self, color, expected):
        assert lighten_color(color, 0.85) == expected


# =============================================================================
# Palette derivation
# =============================================================================


class TestDeriveColors:
    def test_base_colors_copied_in_light_mode(self, base_colors):
        palette = derive_colors(base_colors, False).to_document()
        for key, value in DEFAULT_COLORS.items():
            assert palette[key] == value

    def test_status_tints(self, base_colors):
        palette = derive_colors(base_colors, False)
        assert palette.success_light == "#dbf5ec"
        assert palette.error_light == "#fde3e3"
        assert palette.warning_light == "#fef0da"
        assert palette.info_light == "#e2ecfe"

    def test_variants(self, base_colors):
        palette = derive_colors(base_colors, False)
        assert palette.background_light == base_colors.background
        assert palette.background_dark == BACKGROUND_DARK
        assert palette.surface_light == base_colors.surface
        assert palette.surface_dark == SURFACE_DARK
        assert palette.text_primary == base_colors.text
        assert palette.text_muted == TEXT_MUTED
        assert palette.text_dark == TEXT_DARK
        assert palette.border == BORDER
        assert palette.border_dark == BORDER_DARK

    def test_attendance_reuses_status_colors(self, base_colors):
        palette = derive_colors(base_colors, False)
        assert palette.present == base_colors.success
        assert palette.absent == base_colors.error
        assert palette.holiday == base_colors.warning

    def test_fixed_colors(self, base_colors):
        palette = derive_colors(base_colors, False)
        assert palette.subjects == SUBJECT_COLORS
        assert palette.transparent == "transparent"
        assert palette.white == "#ffffff"
        assert palette.black == "#000000"

    def test_dark_mode_overrides(self, base_colors):
        palette = derive_colors(base_colors, True)
        assert palette.background == BACKGROUND_DARK
        assert palette.surface == SURFACE_DARK
        assert palette.text == TEXT_DARK
        assert palette.text_secondary == TEXT_MUTED
        assert palette.border == BORDER_DARK

    def test_dark_mode_is_partial_override(self, base_colors):
        light = derive_colors(base_colors, False).to_document()
        dark = derive_colors(base_colors, True).to_document()

        changed = {key for key in light if light[key] != dark[key]}
        assert changed == DARK_OVERRIDDEN

    def test_primary_unchanged_in_dark_mode(self, base_colors):
        assert derive_colors(base_colors, True).primary == base_colors.primary

    def test_deterministic(self, base_colors):
        assert derive_colors(base_colors, True) == derive_colors(base_colors, True)

    def test_equal_inputs_share_result(self):
        first = BrandColors.model_validate(DEFAULT_COLORS)
        second = BrandColors.model_validate(dict(DEFAULT_COLORS))
        assert derive_colors(first, False) is derive_colors(second, False)

    def test_malformed_status_color_used_untinted(self):
        base = BrandColors.model_validate({**DEFAULT_COLORS, "success": "green"})
        with capture_logs() as logs:
            palette = derive_colors(base, False)

        assert palette.success_light == "green"
        assert palette.success == "green"
        assert any(log["event"] == "color_tint_failed" for log in logs)


class TestTenantColors:
    def test_dark_requested_without_availability(self):
        config = normalize({"features": {"darkMode": False}})
        assert tenant_colors(config, True) == tenant_colors(config, False)
        assert tenant_colors(config, True).background == DEFAULT_COLORS["background"]

    def test_dark_requested_with_availability(self):
        config = normalize({"features": {"darkMode": True}})
        assert tenant_colors(config, True).background == BACKGROUND_DARK

    def test_tenant_base_colors_flow_through(self, full_document):
        config = normalize(full_document)
        palette = tenant_colors(config, False)
        assert palette.primary == "#15803d"
        assert palette.present == "#22c55e"


# =============================================================================
# Dark mode state
# =============================================================================


class TestDarkModeController:
    def test_starts_following_system(self):
        controller = DarkModeController(available=True)
        assert controller.state == DarkModeState.SYSTEM
        assert controller.is_dark_mode is False

    def test_system_scheme_dark(self):
        controller = DarkModeController(available=True, system_scheme=lambda: "dark")
        assert controller.is_dark_mode is True

    def test_system_scheme_unknown(self):
        controller = DarkModeController(available=True, system_scheme=lambda: None)
        assert controller.is_dark_mode is False

    def test_toggle_from_system_flips_effective_value(self):
        controller = DarkModeController(available=True, system_scheme=lambda: "dark")
        assert controller.toggle() is False
        assert controller.state == DarkModeState.OFF

    def test_toggle_alternates(self):
        controller = DarkModeController(available=True)
        assert controller.toggle() is True
        assert controller.state == DarkModeState.ON
        assert controller.toggle() is False
        assert controller.state == DarkModeState.OFF
        assert controller.toggle() is True

    def test_set_explicit(self):
        controller = DarkModeController(available=True, system_scheme=lambda: "dark")
        assert controller.set_explicit(False) is False
        assert controller.state == DarkModeState.OFF
        assert controller.set_explicit(True) is True
        assert controller.state == DarkModeState.ON

    def test_explicit_choice_ignores_system_scheme(self):
        scheme = {"value": "light"}
        controller = DarkModeController(available=True, system_scheme=lambda: scheme["value"])
        controller.set_explicit(False)
        scheme["value"] = "dark"
        assert controller.is_dark_mode is False

    def test_unavailable_is_always_light(self):
        controller = DarkModeController(
            available=False, system_scheme=lambda: "dark", state=DarkModeState.ON
        )
        assert controller.is_dark_mode is False

    def test_unavailable_toggle_is_noop(self):
        controller = DarkModeController(available=False)
        with capture_logs() as logs:
            assert controller.toggle() is False
            assert controller.set_explicit(True) is False

        assert controller.state == DarkModeState.SYSTEM
        assert [log["event"] for log in logs] == ["dark_mode_unavailable"] * 2
