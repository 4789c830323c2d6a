"""Domain models for brand configuration."""

from schooltree_brand.models.base import BaseModel, ExtensibleModel
from schooltree_brand.models.tenant import (
    MODULE_ATTRIBUTES,
    ApiSettings,
    AuthMode,
    AuthSettings,
    BrandColors,
    BrandFeatures,
    BrandFonts,
    BrandIdentity,
    BrandModules,
    FeesModuleConfig,
    FirebaseSettings,
    ModuleConfig,
    ModuleName,
    NotificationSettings,
    RawTenantDocument,
    ResolvedTenantConfig,
    ThemeSettings,
)
from schooltree_brand.models.theme import DarkModeState, ExtendedColorSet, SubjectColors

__all__ = [
    # Base
    "BaseModel",
    "ExtensibleModel",
    # Tenant
    "RawTenantDocument",
    "ResolvedTenantConfig",
    "AuthMode",
    "AuthSettings",
    "ApiSettings",
    "BrandIdentity",
    "FirebaseSettings",
    "BrandColors",
    "BrandFonts",
    "ThemeSettings",
    "ModuleName",
    "MODULE_ATTRIBUTES",
    "ModuleConfig",
    "FeesModuleConfig",
    "BrandModules",
    "NotificationSettings",
    "BrandFeatures",
    # Theme
    "DarkModeState",
    "ExtendedColorSet",
    "SubjectColors",
]
