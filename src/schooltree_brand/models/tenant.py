"""Tenant configuration domain models."""

from enum import StrEnum
from typing import Any

from pydantic import Field

from schooltree_brand.models.base import BaseModel, ExtensibleModel

# Raw, externally authored brand document (brand.config.json). Any key may be missing.
RawTenantDocument = dict[str, Any]


class AuthMode(StrEnum):
    """Authentication screens a tenant offers."""

    OTP = "otp"
    PASSWORD = "password"
    BOTH = "both"


class ModuleName(StrEnum):
    """Closed set of application modules that can be gated per tenant."""

    DASHBOARD = "dashboard"
    CIRCULARS = "circulars"
    HOMEWORK = "homework"
    ATTENDANCE = "attendance"
    EXAMS = "exams"
    MARKS = "marks"
    FEES = "fees"
    CALENDAR = "calendar"
    GALLERY = "gallery"
    TIMETABLE = "timetable"
    CHAT = "chat"
    PROFILE = "profile"
    PARENT_MESSAGE = "parentMessage"
    LEAVE_LETTER = "leaveLetter"

    @property
    def attribute(self) -> str:
        """Attribute name of this module on BrandModules."""
        return MODULE_ATTRIBUTES[self]


MODULE_ATTRIBUTES: dict[ModuleName, str] = {
    ModuleName.DASHBOARD: "dashboard",
    ModuleName.CIRCULARS: "circulars",
    ModuleName.HOMEWORK: "homework",
    ModuleName.ATTENDANCE: "attendance",
    ModuleName.EXAMS: "exams",
    ModuleName.MARKS: "marks",
    ModuleName.FEES: "fees",
    ModuleName.CALENDAR: "calendar",
    ModuleName.GALLERY: "gallery",
    ModuleName.TIMETABLE: "timetable",
    ModuleName.CHAT: "chat",
    ModuleName.PROFILE: "profile",
    ModuleName.PARENT_MESSAGE: "parent_message",
    ModuleName.LEAVE_LETTER: "leave_letter",
}


# ============================================================
# Identity and service settings
# ============================================================


class BrandIdentity(BaseModel):
    """Display identity of a school."""

    id: str
    name: str
    short_name: str
    tagline: str


class ApiSettings(BaseModel):
    """Backend endpoint for a tenant."""

    base_url: str
    database_name: str


class FirebaseSettings(BaseModel):
    """Push-notification project identity."""

    project_id: str
    config_group: str


class AuthSettings(BaseModel):
    """Authentication mode and OTP parameters."""

    type: AuthMode
    otp_length: int
    country_code: str


# ============================================================
# Theme
# ============================================================


class BrandColors(BaseModel):
    """The twelve named base colors a brand may author.

    Values are passed through as authored; no hex format check happens here.
    """

    primary: str
    primary_dark: str
    primary_soft: str
    accent: str
    background: str
    surface: str
    text: str
    text_secondary: str
    success: str
    warning: str
    error: str
    info: str


class BrandFonts(BaseModel):
    """Font family names."""

    primary: str
    secondary: str


class ThemeSettings(BaseModel):
    colors: BrandColors
    fonts: BrandFonts


# ============================================================
# Features
# ============================================================


class ModuleConfig(ExtensibleModel):
    """Per-module record: an enabled flag plus optional module-specific settings."""

    enabled: bool


class FeesModuleConfig(ModuleConfig):
    """Fees module record; the payment gateway is off unless authored."""

    show_payment_gateway: bool = False


class BrandModules(BaseModel):
    """Complete module map, one record per ModuleName."""

    dashboard: ModuleConfig
    circulars: ModuleConfig
    homework: ModuleConfig
    attendance: ModuleConfig
    exams: ModuleConfig
    marks: ModuleConfig
    fees: FeesModuleConfig
    calendar: ModuleConfig
    gallery: ModuleConfig
    timetable: ModuleConfig
    chat: ModuleConfig
    profile: ModuleConfig
    parent_message: ModuleConfig
    leave_letter: ModuleConfig

    def get(self, name: ModuleName) -> ModuleConfig | None:
        """Look up a module record by name."""
        return getattr(self, ModuleName(name).attribute, None)

    def items(self) -> list[tuple[ModuleName, ModuleConfig]]:
        return [(name, getattr(self, name.attribute)) for name in ModuleName]


class NotificationSettings(BaseModel):
    enabled: bool
    topics: tuple[str, ...] = Field(default_factory=tuple)


class BrandFeatures(BaseModel):
    """Module map plus the cross-cutting feature toggles."""

    modules: BrandModules
    notifications: NotificationSettings
    offline_mode: bool
    dark_mode: bool


class ResolvedTenantConfig(BaseModel):
    """
    Complete, normalized configuration for one tenant.

    Every field is populated: anything missing from the raw document was filled
    from the default template during normalization. Instances are immutable;
    switching tenants means resolving a new instance.
    """

    brand: BrandIdentity
    api: ApiSettings
    firebase: FirebaseSettings
    auth: AuthSettings
    theme: ThemeSettings
    features: BrandFeatures

    @property
    def tenant_id(self) -> str:
        return self.brand.id
