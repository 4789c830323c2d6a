"""
Brand document validation.

Authoring-time checks for brand.config.json files, run from the CLI before a
brand ships. Normalization never calls this: at runtime documents are
trusted and passed through.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from schooltree_brand.models import AuthMode, RawTenantDocument

REQUIRED_SECTIONS = ("brand", "api", "firebase", "auth", "theme", "features")
RECOMMENDED_COLORS = ("primary", "primaryDark", "background", "surface", "text")
RECOMMENDED_MODULES = ("dashboard", "profile")

BRAND_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


@dataclass
class ValidationReport:
    """Result of validating one brand document.

    Attributes:
        brand_id: Id the document was validated under
        errors: Problems that must be fixed before shipping
        warnings: Problems that degrade to defaults at runtime
    """

    brand_id: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def is_valid_color(value: str) -> bool:
    """Check for ``#rgb`` or ``#rrggbb``."""
    return bool(HEX_COLOR_PATTERN.match(value))


def _mapping(document: dict[str, Any], key: str) -> dict[str, Any]:
    value = document.get(key)
    return value if isinstance(value, dict) else {}


def validate_document(raw: RawTenantDocument, brand_id: str = "") -> ValidationReport:
    """
    Validate a raw brand document.

    Args:
        raw: Document as authored
        brand_id: Id used for reporting (defaults to ``brand.id``)

    Returns:
        ValidationReport listing errors and warnings
    """
    brand = _mapping(raw, "brand")
    report = ValidationReport(brand_id=brand_id or str(brand.get("id", "")))
    errors, warnings = report.errors, report.warnings

    for section in REQUIRED_SECTIONS:
        if not raw.get(section):
            errors.append(f"Missing required field: {section}")

    if brand:
        if not brand.get("id"):
            errors.append("Missing brand.id")
        elif not BRAND_ID_PATTERN.match(str(brand["id"])):
            errors.append(
                "Invalid brand.id format (must be lowercase, start with letter, "
                "use only letters/numbers/underscores)"
            )
        if not brand.get("name"):
            errors.append("Missing brand.name")

    api = _mapping(raw, "api")
    if api:
        if not api.get("baseUrl"):
            errors.append("Missing api.baseUrl")
        if not api.get("databaseName"):
            warnings.append("Missing api.databaseName")

    auth = _mapping(raw, "auth")
    if auth:
        auth_type = auth.get("type")
        if not auth_type:
            errors.append("Missing auth.type")
        elif auth_type not in {mode.value for mode in AuthMode}:
            errors.append(
                f"Invalid auth.type: {auth_type}. Must be 'otp', 'password', or 'both'"
            )

    colors = _mapping(_mapping(raw, "theme"), "colors")
    if colors:
        for color in RECOMMENDED_COLORS:
            if not colors.get(color):
                warnings.append(f"Missing recommended color: theme.colors.{color}")
        for key, value in colors.items():
            if isinstance(value, str) and not is_valid_color(value):
                warnings.append(f"Invalid color format for theme.colors.{key}: {value}")

    modules = _mapping(_mapping(raw, "features"), "modules")
    if modules:
        for module in RECOMMENDED_MODULES:
            if _mapping(modules, module).get("enabled") is None:
                warnings.append(f"Missing module config: features.modules.{module}")

    return report
