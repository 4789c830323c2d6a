"""
Runtime accessor surface.

BrandRuntime is the single object the rest of the application queries:
navigation reads the gates, the auth flow reads the auth mode, and screens
read the derived colors. It holds no derivation logic of its own.

Config, gate and dark mode controller are bound together per registry
generation, so a caller never sees gates from one tenant and colors from
another.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import structlog

from schooltree_brand.config import Settings, get_settings
from schooltree_brand.gate import FeatureFlag, FeatureGate
from schooltree_brand.models import (
    ApiSettings,
    AuthMode,
    DarkModeState,
    ExtendedColorSet,
    ModuleConfig,
    ModuleName,
    RawTenantDocument,
    ResolvedTenantConfig,
)
from schooltree_brand.registry import TenantRegistry, load_builtin_registry
from schooltree_brand.resolver import NativeIdentity, TenantResolver
from schooltree_brand.theme import DarkModeController, SystemColorScheme, derive_colors

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class _Binding:
    """Config and everything derived from it for one registry generation."""

    registry_generation: int
    generation: int
    tenant_id: str
    config: ResolvedTenantConfig
    gate: FeatureGate
    dark_mode: DarkModeController


@dataclass(frozen=True)
class BrandSnapshot:
    """Consistent point-in-time view of the active tenant."""

    generation: int
    tenant_id: str
    config: ResolvedTenantConfig
    colors: ExtendedColorSet
    is_dark_mode: bool
    enabled_modules: tuple[ModuleName, ...]


class BrandRuntime:
    """
    Read-only facade over the resolved brand.

    Example:
        >>> runtime = create_runtime()
        >>> runtime.is_module_enabled(ModuleName.CHAT)
        False
        >>> runtime.colors.primary
        '#137fec'
    """

    def __init__(
        self,
        resolver: TenantResolver,
        tenant_id: str | None = None,
        system_scheme: SystemColorScheme | None = None,
    ):
        """
        Initialize the runtime.

        Args:
            resolver: Tenant resolver owning the registry
            tenant_id: Explicit tenant to serve instead of the active one
            system_scheme: Callable reporting the host color scheme
        """
        self._resolver = resolver
        self._tenant_override = tenant_id
        self._system_scheme = system_scheme
        self._switches = 0
        self._binding = self._bind(DarkModeState.SYSTEM)

    def _bind(self, dark_state: DarkModeState) -> _Binding:
        config = self._resolver.get_config(self._tenant_override)
        binding = _Binding(
            registry_generation=self._resolver.generation,
            generation=self._resolver.generation + self._switches,
            tenant_id=config.tenant_id,
            config=config,
            gate=FeatureGate(config),
            dark_mode=DarkModeController(
                available=config.features.dark_mode,
                system_scheme=self._system_scheme,
                state=dark_state,
            ),
        )
        logger.debug(
            "brand_runtime_bound",
            tenant_id=binding.tenant_id,
            generation=binding.generation,
        )
        return binding

    def _current(self) -> _Binding:
        binding = self._binding
        if binding.registry_generation != self._resolver.generation:
            binding = self._bind(binding.dark_mode.state)
            self._binding = binding
        return binding

    # ------------------------------------------------------------
    # Tenant
    # ------------------------------------------------------------

    @property
    def resolver(self) -> TenantResolver:
        return self._resolver

    @property
    def generation(self) -> int:
        """Registry generation plus tenant switches; changes whenever the binding does."""
        return self._current().generation

    @property
    def config(self) -> ResolvedTenantConfig:
        return self._current().config

    @property
    def tenant_id(self) -> str:
        return self._current().tenant_id

    @property
    def brand_name(self) -> str:
        return self._current().config.brand.name

    @property
    def api(self) -> ApiSettings:
        return self._current().config.api

    @property
    def auth_type(self) -> AuthMode:
        return self._current().gate.auth_type

    @property
    def gate(self) -> FeatureGate:
        return self._current().gate

    def available_tenants(self) -> list[str]:
        return self._resolver.available_tenants()

    def register_config(
        self,
        tenant_id: str,
        config: ResolvedTenantConfig | RawTenantDocument,
    ) -> ResolvedTenantConfig:
        """Add or replace a tenant; the runtime rebinds on next access."""
        return self._resolver.register_config(tenant_id, config)

    def switch_tenant(self, tenant_id: str | None) -> ResolvedTenantConfig:
        """
        Serve a different tenant (None returns to the active tenant).

        The dark mode override carries over; it only takes effect if the new
        tenant offers dark mode. Every switch advances ``generation``.
        """
        self._tenant_override = tenant_id
        self._switches += 1
        self._binding = self._bind(self._binding.dark_mode.state)
        logger.info(
            "tenant_switched",
            tenant_id=self._binding.tenant_id,
            generation=self._binding.generation,
        )
        return self._binding.config

    # ------------------------------------------------------------
    # Gating
    # ------------------------------------------------------------

    def is_module_enabled(self, name: ModuleName | str) -> bool:
        return self._current().gate.is_module_enabled(name)

    def get_module_config(self, name: ModuleName | str) -> ModuleConfig | None:
        return self._current().gate.get_module_config(name)

    def enabled_modules(self) -> list[ModuleName]:
        return self._current().gate.enabled_modules()

    def is_notifications_enabled(self) -> bool:
        return self._current().gate.is_notifications_enabled()

    def is_offline_mode_enabled(self) -> bool:
        return self._current().gate.is_offline_mode_enabled()

    def is_dark_mode_available(self) -> bool:
        return self._current().gate.is_dark_mode_available()

    def feature_flag(self, feature: FeatureFlag | str) -> bool:
        return self._current().gate.feature_flag(feature)

    # ------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------

    @property
    def colors(self) -> ExtendedColorSet:
        """Palette for the current tenant and dark mode state."""
        binding = self._current()
        return derive_colors(binding.config.theme.colors, binding.dark_mode.is_dark_mode)

    @property
    def is_dark_mode(self) -> bool:
        return self._current().dark_mode.is_dark_mode

    @property
    def dark_mode_state(self) -> DarkModeState:
        return self._current().dark_mode.state

    def toggle_dark_mode(self) -> bool:
        return self._current().dark_mode.toggle()

    def set_dark_mode(self, enabled: bool) -> bool:
        return self._current().dark_mode.set_explicit(enabled)

    def snapshot(self) -> BrandSnapshot:
        """Capture config, colors and gates from one generation."""
        binding = self._current()
        is_dark = binding.dark_mode.is_dark_mode
        return BrandSnapshot(
            generation=binding.generation,
            tenant_id=binding.tenant_id,
            config=binding.config,
            colors=derive_colors(binding.config.theme.colors, is_dark),
            is_dark_mode=is_dark,
            enabled_modules=tuple(binding.gate.enabled_modules()),
        )


def create_runtime(
    settings: Settings | None = None,
    *,
    registry: TenantRegistry | None = None,
    native_identity: NativeIdentity | None = None,
    system_scheme: SystemColorScheme | None = None,
    tenant_id: str | None = None,
) -> BrandRuntime:
    """
    Wire registry, resolver and runtime together.

    Args:
        settings: Engine settings (cached environment settings if omitted)
        registry: Registry snapshot (packaged brands plus ``settings.brands_dir``
            if omitted)
        native_identity: Callable returning the native build's tenant id
        system_scheme: Callable reporting the host color scheme
        tenant_id: Explicit tenant to serve instead of the active one

    Returns:
        A BrandRuntime bound to the resolved tenant
    """
    settings = settings or get_settings()
    if registry is None:
        brands_dir: Path | None = settings.brands_dir
        registry = load_builtin_registry(brands_dir)

    resolver = TenantResolver(registry, settings, native_identity=native_identity)
    runtime = BrandRuntime(resolver, tenant_id=tenant_id, system_scheme=system_scheme)
    logger.info(
        "brand_runtime_created",
        tenant_id=runtime.tenant_id,
        tenants=len(registry),
    )
    return runtime


@lru_cache
def get_runtime() -> BrandRuntime:
    """Get the process-wide runtime built from environment settings."""
    return create_runtime()
