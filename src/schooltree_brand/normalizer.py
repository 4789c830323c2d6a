"""
Brand document normalization.

Turns a raw, possibly incomplete brand document into a complete
ResolvedTenantConfig by merging it over the default template:

- Modules: each module record is taken whole from the document if present,
  otherwise from the template. Records are never merged field by field.
- Colors: each named base color is taken from the document if present,
  otherwise from the template.
- Every other section (brand, api, firebase, auth, fonts, notifications)
  is filled field by field from the template.

Values are not checked beyond presence: a malformed color string is passed
through unchanged. A value of the wrong type (a list where a string belongs)
surfaces as a pydantic ValidationError.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from schooltree_brand.defaults import DEFAULT_CONFIG_TEMPLATE
from schooltree_brand.exceptions import BrandDocumentError
from schooltree_brand.models import ModuleName, RawTenantDocument, ResolvedTenantConfig

logger = structlog.get_logger(__name__)

_MODULE_KEYS = frozenset(name.value for name in ModuleName)


def _section(document: Mapping[str, Any] | None, key: str) -> Mapping[str, Any]:
    """Return a nested mapping, treating a missing or null section as empty."""
    if document is None:
        return {}
    value = document.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise BrandDocumentError(f"Section '{key}' must be an object, got {type(value).__name__}")
    return value


def _fill(raw: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Take each template field from ``raw`` when present, else from ``defaults``.

    Keys unknown to the template are dropped.
    """
    return {key: _pick(raw, defaults, key) for key in defaults}


def _pick(raw: Mapping[str, Any], defaults: Mapping[str, Any], key: str) -> Any:
    value = raw.get(key)
    return defaults[key] if value is None else value


def merge_colors(
    raw_colors: Mapping[str, Any] | None,
    default_colors: Mapping[str, str],
) -> dict[str, Any]:
    """Field-level merge of the base palette."""
    return _fill(raw_colors or {}, default_colors)


def merge_modules(
    raw_modules: Mapping[str, Any] | None,
    default_modules: Mapping[str, Mapping[str, Any]],
) -> dict[str, dict[str, Any]]:
    """
    Record-level merge of the module map.

    Args:
        raw_modules: Module records from the brand document (may be partial)
        default_modules: Complete module map from the template

    Returns:
        A module map with one record per ModuleName
    """
    raw_modules = raw_modules or {}

    for key in raw_modules:
        if key not in _MODULE_KEYS:
            logger.debug("unknown_module_ignored", module=key)

    merged: dict[str, dict[str, Any]] = {}
    for name in ModuleName:
        record = raw_modules.get(name.value)
        if record is None:
            record = default_modules[name.value]
        merged[name.value] = dict(record) if isinstance(record, Mapping) else record
    return merged


def normalize(
    raw: RawTenantDocument | None,
    template: Mapping[str, Any] = DEFAULT_CONFIG_TEMPLATE,
    *,
    tenant_id: str | None = None,
) -> ResolvedTenantConfig:
    """
    Normalize a raw brand document into a complete configuration.

    Pure: neither ``raw`` nor ``template`` is modified.

    Args:
        raw: Brand document as authored (any key may be missing)
        template: Complete default document to fill gaps from
        tenant_id: Registry key; used as ``brand.id`` when the document has none

    Returns:
        ResolvedTenantConfig with every field populated

    Raises:
        BrandDocumentError: If a section such as ``theme`` is present but not an object
        pydantic.ValidationError: If a value has the wrong type
    """
    raw = raw or {}

    theme = _section(raw, "theme")
    features = _section(raw, "features")
    template_theme = template["theme"]
    template_features = template["features"]

    brand = _fill(_section(raw, "brand"), template["brand"])
    if tenant_id and _section(raw, "brand").get("id") is None:
        brand["id"] = tenant_id

    notifications = _fill(
        _section(features, "notifications"), template_features["notifications"]
    )

    document = {
        "brand": brand,
        "api": _fill(_section(raw, "api"), template["api"]),
        "firebase": _fill(_section(raw, "firebase"), template["firebase"]),
        "auth": _fill(_section(raw, "auth"), template["auth"]),
        "theme": {
            "colors": merge_colors(_section(theme, "colors"), template_theme["colors"]),
            "fonts": _fill(_section(theme, "fonts"), template_theme["fonts"]),
        },
        "features": {
            "modules": merge_modules(
                _section(features, "modules"), template_features["modules"]
            ),
            "notifications": notifications,
            "offlineMode": _pick(features, template_features, "offlineMode"),
            "darkMode": _pick(features, template_features, "darkMode"),
        },
    }

    config = ResolvedTenantConfig.model_validate(document)
    logger.debug("brand_document_normalized", tenant_id=config.tenant_id)
    return config
