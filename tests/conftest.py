"""
Pytest fixtures for brand engine tests.

Provides fixtures for:
- Isolated settings (no environment or .env leakage)
- The packaged tenant registry and a resolver over it
- Sample raw brand documents
"""

import pytest

from schooltree_brand.config import Settings, get_settings
from schooltree_brand.registry import TenantRegistry, load_builtin_registry
from schooltree_brand.resolver import TenantResolver

ENV_VARS = (
    "BRAND_ID",
    "API_BASE_URL",
    "BRANDS_DIR",
    "FALLBACK_BRAND_ID",
    "DEFAULT_BRAND_ID",
    "DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove engine environment overrides and reset cached settings."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only."""
    return Settings(_env_file=None)


@pytest.fixture
def registry() -> TenantRegistry:
    """Registry of the packaged brands."""
    return load_builtin_registry()


@pytest.fixture
def resolver(registry: TenantRegistry, settings: Settings) -> TenantResolver:
    """Resolver over the packaged brands with default settings."""
    return TenantResolver(registry, settings)


@pytest.fixture
def fees_document() -> dict:
    """Document that only enables the payment gateway."""
    return {
        "features": {
            "modules": {
                "fees": {"enabled": True, "showPaymentGateway": True},
            }
        }
    }


@pytest.fixture
def full_document() -> dict:
    """A complete brand document."""
    return {
        "brand": {
            "id": "greenvalley",
            "name": "Green Valley Public School",
            "shortName": "Green Valley",
            "tagline": "Grow with us",
        },
        "api": {"baseUrl": "https://gv.example.com/api", "databaseName": "gv_db"},
        "firebase": {"projectId": "gv-project", "configGroup": "greenvalley"},
        "auth": {"type": "password", "otpLength": 4, "countryCode": "+94"},
        "theme": {
            "colors": {
                "primary": "#15803d",
                "primaryDark": "#166534",
                "primarySoft": "#F0FDF4",
                "accent": "#eab308",
                "background": "#f7f9f7",
                "surface": "#ffffff",
                "text": "#0f1a12",
                "textSecondary": "#5b6b60",
                "success": "#22c55e",
                "warning": "#eab308",
                "error": "#dc2626",
                "info": "#0284c7",
            },
            "fonts": {"primary": "Inter", "secondary": "Merriweather"},
        },
        "features": {
            "modules": {
                "chat": {"enabled": True, "provider": "gemini"},
                "gallery": {"enabled": False},
            },
            "notifications": {"enabled": False, "topics": ["circulars"]},
            "offlineMode": False,
            "darkMode": True,
        },
    }
