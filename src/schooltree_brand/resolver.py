"""
Tenant Resolver

Decides which tenant this process serves and hands out its resolved config.
"""

from collections.abc import Callable, Mapping

import structlog

from schooltree_brand.config import Settings, get_settings
from schooltree_brand.defaults import DEFAULT_CONFIG_TEMPLATE
from schooltree_brand.models import RawTenantDocument, ResolvedTenantConfig
from schooltree_brand.normalizer import normalize
from schooltree_brand.registry import TenantRegistry

logger = structlog.get_logger(__name__)

# Reports the tenant id baked into the native build (flavor), or None.
NativeIdentity = Callable[[], str | None]


class TenantResolver:
    """
    Resolves the active tenant and its configuration.

    Active tenant id, in order of precedence:
    1. the identity reported by the native platform build
    2. the BRAND_ID environment override
    3. the fallback tenant id from settings

    Unknown ids never raise: they degrade to the default tenant with a warning.
    Every registration bumps ``generation`` so callers holding derived state can
    tell that the registry changed underneath them.
    """

    def __init__(
        self,
        registry: TenantRegistry,
        settings: Settings | None = None,
        native_identity: NativeIdentity | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Registry snapshot built at startup
            settings: Engine settings (cached environment settings if omitted)
            native_identity: Callable returning the native build's tenant id
        """
        self._settings = settings or get_settings()
        self._native_identity = native_identity
        self._registry = self._apply_overrides(registry)
        self._generation = 0
        self._builtin_default: ResolvedTenantConfig | None = None
        self._log = logger.bind(component="tenant_resolver")

    @property
    def registry(self) -> TenantRegistry:
        return self._registry

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def settings(self) -> Settings:
        return self._settings

    def resolve_active_tenant_id(self) -> str:
        """Determine the tenant id this process serves."""
        if self._native_identity is not None:
            native_id = self._native_identity()
            if native_id:
                return native_id

        if self._settings.brand_id:
            return self._settings.brand_id

        return self._settings.fallback_brand_id

    def get_config(self, tenant_id: str | None = None) -> ResolvedTenantConfig:
        """
        Get the resolved configuration for a tenant.

        Args:
            tenant_id: Tenant to look up; the active tenant when omitted

        Returns:
            The tenant's config, or the default tenant's config when the id is
            not registered
        """
        requested = tenant_id or self.resolve_active_tenant_id()
        config = self._registry.get(requested)
        if config is not None:
            return config

        default_id = self._settings.default_brand_id
        self._log.warning("tenant_not_found", tenant_id=requested, fallback=default_id)

        config = self._registry.get(default_id)
        if config is not None:
            return config

        # Default tenant itself is missing: serve the bare template.
        if self._builtin_default is None:
            self._log.error("default_tenant_missing", tenant_id=default_id)
            self._builtin_default = self._apply_api_override(
                normalize(DEFAULT_CONFIG_TEMPLATE, tenant_id=default_id)
            )
        return self._builtin_default

    def register_config(
        self,
        tenant_id: str,
        config: ResolvedTenantConfig | RawTenantDocument,
    ) -> ResolvedTenantConfig:
        """
        Add or replace a tenant after startup.

        The previous entry for ``tenant_id`` is replaced outright. A raw
        document is normalized first.

        Returns:
            The configuration as stored (with environment overrides applied)
        """
        if not isinstance(config, ResolvedTenantConfig):
            config = normalize(config, tenant_id=tenant_id)

        config = self._apply_api_override(config)
        self._registry = self._registry.with_config(tenant_id, config)
        self._generation += 1
        self._log.info("tenant_registered", tenant_id=tenant_id, generation=self._generation)
        return config

    def available_tenants(self) -> list[str]:
        """Get all registered tenant ids."""
        return self._registry.ids()

    def _apply_overrides(self, registry: Mapping[str, ResolvedTenantConfig]) -> TenantRegistry:
        if not self._settings.api_base_url:
            return registry if isinstance(registry, TenantRegistry) else TenantRegistry(registry)
        return TenantRegistry(
            {tenant_id: self._apply_api_override(config) for tenant_id, config in registry.items()}
        )

    def _apply_api_override(self, config: ResolvedTenantConfig) -> ResolvedTenantConfig:
        """Swap in the API_BASE_URL override; no other field is touched."""
        override = self._settings.api_base_url
        if not override or config.api.base_url == override:
            return config
        api = config.api.model_copy(update={"base_url": override})
        return config.model_copy(update={"api": api})
