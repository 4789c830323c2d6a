"""
Theme derivation.

Builds the full ExtendedColorSet from a tenant's twelve base colors:

- Base colors are copied through unchanged.
- Status tints (successLight, ...) are the status color mixed 85% toward white.
- Background, surface and text variants pair the brand's light values with
  fixed dark counterparts.
- Subject, attendance and common colors are fixed for every tenant, except
  attendance states, which reuse the brand's status colors.

Dark mode is a partial override: background, surface, text, border and
textSecondary switch to their dark counterparts; everything else is the same
in both modes.
"""

from collections.abc import Callable
from decimal import ROUND_FLOOR, Decimal
from functools import lru_cache

import structlog

from schooltree_brand.models import (
    BrandColors,
    DarkModeState,
    ExtendedColorSet,
    ResolvedTenantConfig,
    SubjectColors,
)

logger = structlog.get_logger(__name__)

STATUS_TINT = 0.85

BACKGROUND_DARK = "#101922"
SURFACE_DARK = "#1e293b"
TEXT_MUTED = "#94A3B8"
TEXT_DARK = "#f3f4f6"
BORDER = "#E2E8F0"
BORDER_DARK = "#334155"
SHADOW = "rgba(0, 0, 0, 0.05)"
OVERLAY = "rgba(0, 0, 0, 0.5)"
LEAVE = "#8b5cf6"
WHITE = "#ffffff"
BLACK = "#000000"

SUBJECT_COLORS = SubjectColors(
    maths="#3b82f6",
    science="#10b981",
    english="#8b5cf6",
    history="#f59e0b",
    geography="#14b8a6",
    social="#f97316",
)

# Reports the host color scheme ("light", "dark") or None when unknown.
SystemColorScheme = Callable[[], str | None]


# ============================================================
# Color math
# ============================================================


def parse_hex(color: str) -> tuple[int, int, int]:
    """
    Parse ``#rrggbb``, ``rrggbb`` or ``#rgb`` into an RGB triple.

    Raises:
        ValueError: If ``color`` is not a hex color
    """
    digits = color.strip().removeprefix("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _round_half_up(value: float) -> int:
    # floor(x + 0.5) on the exact value; halves round toward +inf, never to even.
    return int((Decimal(value) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def lighten_color(color: str, percent: float) -> str:
    """
    Mix a hex color toward white.

    Each channel becomes ``round(c + (255 - c) * percent)`` clamped to 0..255.
    ``percent=0`` returns the color itself, ``percent=1`` returns white.

    Args:
        color: Hex color (``#rrggbb``, ``rrggbb`` or ``#rgb``)
        percent: Fraction of the distance to white, 0.0 to 1.0

    Returns:
        Lowercase ``#rrggbb`` string

    Raises:
        ValueError: If ``color`` is not a hex color
    """
    channels = (
        max(0, min(255, _round_half_up(c + (255 - c) * percent))) for c in parse_hex(color)
    )
    return "#" + "".join(f"{c:02x}" for c in channels)


def _status_tint(color: str, field: str) -> str:
    try:
        return lighten_color(color, STATUS_TINT)
    except ValueError:
        # Brand colors are not validated; an unparsable one is used untinted.
        logger.warning("color_tint_failed", field=field, color=color)
        return color


# ============================================================
# Derivation
# ============================================================


@lru_cache(maxsize=64)
def derive_colors(base: BrandColors, dark_mode: bool) -> ExtendedColorSet:
    """
    Derive the full palette for a brand.

    Pure and memoized: the same ``(base, dark_mode)`` pair always yields the
    same ExtendedColorSet.

    Args:
        base: The tenant's base colors
        dark_mode: Whether the dark override is active

    Returns:
        Complete palette for the UI layer
    """
    colors = {
        **base.model_dump(),
        # Background variants
        "background_light": base.background,
        "background_dark": BACKGROUND_DARK,
        "surface_light": base.surface,
        "surface_dark": SURFACE_DARK,
        # Text variants
        "text_primary": base.text,
        "text_muted": TEXT_MUTED,
        "text_dark": TEXT_DARK,
        "text_white": WHITE,
        # Status tints
        "success_light": _status_tint(base.success, "success"),
        "warning_light": _status_tint(base.warning, "warning"),
        "error_light": _status_tint(base.error, "error"),
        "info_light": _status_tint(base.info, "info"),
        "subjects": SUBJECT_COLORS,
        # Semantic
        "border": BORDER,
        "border_dark": BORDER_DARK,
        "shadow": SHADOW,
        # Attendance
        "present": base.success,
        "absent": base.error,
        "holiday": base.warning,
        "leave": LEAVE,
        # Common
        "transparent": "transparent",
        "overlay": OVERLAY,
        "white": WHITE,
        "black": BLACK,
    }

    if dark_mode:
        colors.update(
            background=colors["background_dark"],
            surface=colors["surface_dark"],
            text=colors["text_dark"],
            text_secondary=colors["text_muted"],
            border=colors["border_dark"],
        )

    return ExtendedColorSet(**colors)


def tenant_colors(config: ResolvedTenantConfig, dark_mode: bool) -> ExtendedColorSet:
    """Derive a tenant's palette; a tenant without dark mode always gets light colors."""
    return derive_colors(config.theme.colors, dark_mode and config.features.dark_mode)


# ============================================================
# Dark mode state
# ============================================================


class DarkModeController:
    """
    Tracks the dark mode override for one tenant.

    States: SYSTEM (follow the host scheme), ON, OFF. ``toggle`` from SYSTEM
    moves to the opposite of the current effective value; ON and OFF flip
    between each other; ``set_explicit`` jumps straight to ON or OFF. There is
    no transition back to SYSTEM.

    When the tenant does not offer dark mode, the effective value is always
    False and ``toggle``/``set_explicit`` leave the state untouched.
    """

    def __init__(
        self,
        available: bool,
        system_scheme: SystemColorScheme | None = None,
        state: DarkModeState = DarkModeState.SYSTEM,
    ):
        self._available = available
        self._system_scheme = system_scheme
        self._state = state

    @property
    def available(self) -> bool:
        return self._available

    @property
    def state(self) -> DarkModeState:
        return self._state

    @property
    def is_dark_mode(self) -> bool:
        """Effective dark mode value."""
        if not self._available:
            return False
        if self._state is DarkModeState.ON:
            return True
        if self._state is DarkModeState.OFF:
            return False
        return self._system_prefers_dark()

    def toggle(self) -> bool:
        """Flip the effective value. Returns the effective value afterwards."""
        if not self._available:
            logger.debug("dark_mode_unavailable", action="toggle")
            return False

        if self._state is DarkModeState.SYSTEM:
            enable = not self._system_prefers_dark()
        else:
            enable = self._state is DarkModeState.OFF

        self._state = DarkModeState.ON if enable else DarkModeState.OFF
        return enable

    def set_explicit(self, enabled: bool) -> bool:
        """Force dark mode on or off. Returns the effective value afterwards."""
        if not self._available:
            logger.debug("dark_mode_unavailable", action="set", enabled=enabled)
            return False

        self._state = DarkModeState.ON if enabled else DarkModeState.OFF
        return enabled

    def _system_prefers_dark(self) -> bool:
        if self._system_scheme is None:
            return False
        return self._system_scheme() == "dark"
