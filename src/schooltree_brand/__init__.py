"""SchoolTree Brand - white-label brand configuration and theme engine."""

from schooltree_brand.config import Settings, get_settings
from schooltree_brand.defaults import (
    DEFAULT_BRAND_ID,
    DEFAULT_COLORS,
    DEFAULT_CONFIG_TEMPLATE,
    DEFAULT_MODULES,
)
from schooltree_brand.exceptions import BrandConfigError, BrandDocumentError
from schooltree_brand.gate import FeatureGate
from schooltree_brand.models import (
    AuthMode,
    DarkModeState,
    ExtendedColorSet,
    ModuleConfig,
    ModuleName,
    RawTenantDocument,
    ResolvedTenantConfig,
)
from schooltree_brand.normalizer import normalize
from schooltree_brand.registry import (
    TenantRegistry,
    TenantRegistryBuilder,
    load_builtin_registry,
)
from schooltree_brand.resolver import TenantResolver
from schooltree_brand.runtime import BrandRuntime, BrandSnapshot, create_runtime, get_runtime
from schooltree_brand.theme import (
    STATUS_TINT,
    DarkModeController,
    derive_colors,
    lighten_color,
    tenant_colors,
)
from schooltree_brand.validation import ValidationReport, validate_document

__version__ = "0.1.0"

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Defaults
    "DEFAULT_BRAND_ID",
    "DEFAULT_COLORS",
    "DEFAULT_MODULES",
    "DEFAULT_CONFIG_TEMPLATE",
    # Errors
    "BrandConfigError",
    "BrandDocumentError",
    # Models
    "AuthMode",
    "DarkModeState",
    "ExtendedColorSet",
    "ModuleConfig",
    "ModuleName",
    "RawTenantDocument",
    "ResolvedTenantConfig",
    # Engine
    "normalize",
    "TenantRegistry",
    "TenantRegistryBuilder",
    "load_builtin_registry",
    "TenantResolver",
    "FeatureGate",
    "STATUS_TINT",
    "DarkModeController",
    "derive_colors",
    "lighten_color",
    "tenant_colors",
    # Runtime
    "BrandRuntime",
    "BrandSnapshot",
    "create_runtime",
    "get_runtime",
    # Validation
    "ValidationReport",
    "validate_document",
    "__version__",
]
