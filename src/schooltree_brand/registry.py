"""
Tenant registry.

The registry is assembled once during startup with TenantRegistryBuilder and
then frozen into an immutable TenantRegistry snapshot. Late registration
produces a new snapshot (``with_config``) instead of editing the old one.

Built-in brand documents ship as package data under ``schooltree_brand/brands``.
Additional documents can be loaded from a directory laid out as
``<dir>/<brand_id>/brand.config.json``.
"""

import json
from collections.abc import Iterator, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog

from schooltree_brand.defaults import DEFAULT_CONFIG_TEMPLATE
from schooltree_brand.exceptions import BrandDocumentError
from schooltree_brand.models import RawTenantDocument, ResolvedTenantConfig
from schooltree_brand.normalizer import normalize

logger = structlog.get_logger(__name__)

BRAND_CONFIG_FILENAME = "brand.config.json"


# ============================================================
# Document loading
# ============================================================


def parse_document(text: str, source: Path | str | None = None) -> RawTenantDocument:
    """Parse a JSON brand document, requiring a top-level object."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise BrandDocumentError(f"Invalid JSON in brand document: {e}", source) from e

    if not isinstance(document, dict):
        raise BrandDocumentError("Brand document must be a JSON object", source)
    return document


def read_document(path: Path) -> RawTenantDocument:
    """Read a brand document from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BrandDocumentError(f"Cannot read brand document: {e}", path) from e
    return parse_document(text, path)


def builtin_documents() -> dict[str, RawTenantDocument]:
    """Load the brand documents packaged with the engine, keyed by brand id."""
    documents: dict[str, RawTenantDocument] = {}
    package = resources.files("schooltree_brand.brands")
    for entry in sorted(package.iterdir(), key=lambda e: e.name):
        if not entry.name.endswith(".json"):
            continue
        brand_id = entry.name.removesuffix(".json")
        documents[brand_id] = parse_document(entry.read_text(encoding="utf-8"), entry.name)
    return documents


def directory_documents(directory: Path) -> dict[str, RawTenantDocument]:
    """
    Load brand documents from a brands directory.

    Sub-directories starting with ``_`` or ``.`` (templates, hidden folders)
    are skipped, as are directories without a brand.config.json.

    Args:
        directory: Directory containing one folder per brand

    Returns:
        Raw documents keyed by folder name
    """
    if not directory.is_dir():
        raise BrandDocumentError("Brands directory not found", directory)

    documents: dict[str, RawTenantDocument] = {}
    for brand_dir in sorted(directory.iterdir()):
        if not brand_dir.is_dir() or brand_dir.name.startswith(("_", ".")):
            continue
        config_path = brand_dir / BRAND_CONFIG_FILENAME
        if not config_path.is_file():
            logger.warning("brand_config_missing", brand_id=brand_dir.name, path=str(config_path))
            continue
        documents[brand_dir.name] = read_document(config_path)
    return documents


# ============================================================
# Registry
# ============================================================


class TenantRegistry(Mapping[str, ResolvedTenantConfig]):
    """Immutable snapshot of resolved tenant configurations keyed by tenant id."""

    def __init__(self, configs: Mapping[str, ResolvedTenantConfig] | None = None):
        self._configs = MappingProxyType(dict(configs or {}))

    def __getitem__(self, tenant_id: str) -> ResolvedTenantConfig:
        return self._configs[tenant_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"TenantRegistry({list(self._configs)!r})"

    def ids(self) -> list[str]:
        """Registered tenant ids in registration order."""
        return list(self._configs)

    def with_config(self, tenant_id: str, config: ResolvedTenantConfig) -> "TenantRegistry":
        """Return a new snapshot with ``tenant_id`` set to ``config``.

        An existing entry is replaced outright, not merged.
        """
        configs = dict(self._configs)
        configs[tenant_id] = config
        return TenantRegistry(configs)


class TenantRegistryBuilder:
    """
    Startup-phase collector for tenant configurations.

    Example:
        >>> registry = (
        ...     TenantRegistryBuilder()
        ...     .load_builtin()
        ...     .add_document("demo", {"brand": {"name": "Demo School"}})
        ...     .build()
        ... )
    """

    def __init__(self, template: Mapping[str, Any] = DEFAULT_CONFIG_TEMPLATE):
        self._template = template
        self._configs: dict[str, ResolvedTenantConfig] = {}

    def add_config(self, tenant_id: str, config: ResolvedTenantConfig) -> "TenantRegistryBuilder":
        """Register an already resolved configuration, replacing any existing entry."""
        if tenant_id in self._configs:
            logger.info("tenant_replaced", tenant_id=tenant_id)
        self._configs[tenant_id] = config
        return self

    def add_document(self, tenant_id: str, raw: RawTenantDocument) -> "TenantRegistryBuilder":
        """Normalize and register a raw brand document."""
        return self.add_config(tenant_id, normalize(raw, self._template, tenant_id=tenant_id))

    def add_documents(self, documents: Mapping[str, RawTenantDocument]) -> "TenantRegistryBuilder":
        for tenant_id, raw in documents.items():
            self.add_document(tenant_id, raw)
        return self

    def load_builtin(self) -> "TenantRegistryBuilder":
        """Register the brand documents packaged with the engine."""
        return self.add_documents(builtin_documents())

    def load_directory(self, directory: Path | str) -> "TenantRegistryBuilder":
        """Register every brand found in a brands directory."""
        directory = Path(directory)
        documents = directory_documents(directory)
        logger.info("brands_directory_loaded", path=str(directory), count=len(documents))
        return self.add_documents(documents)

    def build(self) -> TenantRegistry:
        """Freeze the collected configurations into a registry snapshot."""
        registry = TenantRegistry(self._configs)
        logger.debug("tenant_registry_built", tenants=registry.ids())
        return registry


def load_builtin_registry(extra_dir: Path | str | None = None) -> TenantRegistry:
    """
    Build the registry from packaged brands plus an optional brands directory.

    Documents in ``extra_dir`` override packaged brands with the same id.
    """
    builder = TenantRegistryBuilder().load_builtin()
    if extra_dir is not None:
        builder.load_directory(extra_dir)
    return builder.build()
