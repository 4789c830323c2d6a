"""Derived palette models."""

from enum import StrEnum

from schooltree_brand.models.base import BaseModel
from schooltree_brand.models.tenant import BrandColors


class DarkModeState(StrEnum):
    """Dark mode override state."""

    SYSTEM = "system"  # No explicit choice, follow the host color scheme
    ON = "on"
    OFF = "off"


class SubjectColors(BaseModel):
    """Fixed subject-area colors, identical for every tenant."""

    maths: str
    science: str
    english: str
    history: str
    geography: str
    social: str


class ExtendedColorSet(BrandColors):
    """
    Full palette consumed by the UI layer.

    Base colors come from the tenant; every other field is derived from them
    (or fixed) by the theme engine. Nothing here is independently settable.
    """

    # Background variants
    background_light: str
    background_dark: str
    surface_light: str
    surface_dark: str

    # Text variants
    text_primary: str
    text_muted: str
    text_dark: str
    text_white: str

    # Status tints
    success_light: str
    warning_light: str
    error_light: str
    info_light: str

    subjects: SubjectColors

    # Semantic
    border: str
    border_dark: str
    shadow: str

    # Attendance
    present: str
    absent: str
    holiday: str
    leave: str

    # Common
    transparent: str
    overlay: str
    white: str
    black: str
