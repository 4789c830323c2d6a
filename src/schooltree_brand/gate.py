"""Feature gating over a resolved tenant configuration."""

from typing import Literal

from schooltree_brand.models import AuthMode, ModuleConfig, ModuleName, ResolvedTenantConfig

FeatureFlag = Literal["darkMode", "offlineMode", "notifications", "paymentGateway"]


class FeatureGate:
    """
    Answers which modules and features exist for a tenant.

    Every answer is a plain read of the config instance the gate was built
    with, so repeated questions always get the same answer.

    Example:
        >>> gate = FeatureGate(config)
        >>> if gate.is_module_enabled(ModuleName.FEES):
        ...     fees = gate.get_module_config(ModuleName.FEES)
    """

    def __init__(self, config: ResolvedTenantConfig):
        self._config = config

    @property
    def config(self) -> ResolvedTenantConfig:
        return self._config

    # ------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------

    def is_module_enabled(self, name: ModuleName | str) -> bool:
        """
        Check if a module is enabled.

        Raises:
            ValueError: If ``name`` is not a known module
        """
        module = self._config.features.modules.get(ModuleName(name))
        return module.enabled if module is not None else False

    def get_module_config(self, name: ModuleName | str) -> ModuleConfig | None:
        """Get a module's full record, or None when the module is disabled."""
        module = self._config.features.modules.get(ModuleName(name))
        if module is None or not module.enabled:
            return None
        return module

    def enabled_modules(self) -> list[ModuleName]:
        """Enabled modules in declaration order."""
        return [name for name, module in self._config.features.modules.items() if module.enabled]

    # ------------------------------------------------------------
    # Cross-cutting flags
    # ------------------------------------------------------------

    def is_notifications_enabled(self) -> bool:
        return self._config.features.notifications.enabled

    def is_offline_mode_enabled(self) -> bool:
        return self._config.features.offline_mode

    def is_dark_mode_available(self) -> bool:
        return self._config.features.dark_mode

    def is_payment_gateway_enabled(self) -> bool:
        return self._config.features.modules.fees.show_payment_gateway

    def feature_flag(self, feature: FeatureFlag | str) -> bool:
        """Look up a cross-cutting flag by name; unknown names are off."""
        match feature:
            case "darkMode":
                return self.is_dark_mode_available()
            case "offlineMode":
                return self.is_offline_mode_enabled()
            case "notifications":
                return self.is_notifications_enabled()
            case "paymentGateway":
                return self.is_payment_gateway_enabled()
            case _:
                return False

    # ------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------

    @property
    def auth_type(self) -> AuthMode:
        return AuthMode(self._config.auth.type)

    def allows_auth(self, *modes: AuthMode | str) -> bool:
        """Check whether the tenant's auth mode is one of ``modes``.

        Example: ``gate.allows_auth("otp", "both")`` decides whether the OTP
        entry screen exists.
        """
        return self.auth_type in {AuthMode(mode) for mode in modes}
