import logging

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from integrator.details.build_type import BuildType
from integrator.details.sandbox import Sandbox
from integrator.errors import UnknownConfigurationError

logger = logging.getLogger(__name__)

# (target, configuration_name, configuration) -> settings table
SettingsFactory = Callable[[Any, str, str], Any]


class Target:
    """Identity shared by every target the integrator generates support files for."""

    def __init__(
        self,
        *,
        sandbox: Sandbox,
        build_type: BuildType,
        user_build_configurations: Dict[str, str],
        archs: List[str],
        platform: str,
        settings_factory: Optional[SettingsFactory] = None,
    ):
        self.sandbox = sandbox
        self.build_type = build_type
        self.user_build_configurations = dict(user_build_configurations)
        self.archs = list(archs)
        self.platform = platform
        self.application_extension_api_only = False
        self.build_library_for_distribution = False
        self._settings_factory = settings_factory
        self._build_settings: Dict[str, Any] = {}

    @property
    def label(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement label")

    @property
    def name(self) -> str:
        return self.label

    def mark_application_extension_api_only(self):
        self.application_extension_api_only = True

    def mark_build_library_for_distribution(self):
        self.build_library_for_distribution = True

    @property
    def support_files_dir(self) -> Path:
        return self.sandbox.target_support_files_dir(self.name)

    def xcconfig_path(self, variant: Optional[str] = None) -> Path:
        if variant:
            variant = variant.replace("/", "-").lower()
            return self.support_files_dir.joinpath(f"{self.label}.{variant}.xcconfig")
        return self.support_files_dir.joinpath(f"{self.label}.xcconfig")

    @property
    def bridge_support_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}.bridgesupport")

    def build_settings(self, configuration_name: Optional[str] = None) -> Any:
        """
        Return the settings table of one build configuration.

        Tables are created on first request and cached per configuration.
        Without a name the first declared configuration is used.

        Raises:
            UnknownConfigurationError: If the configuration is not recognized,
                or if no name is given and the target has no configurations.
        """
        if configuration_name is None:
            if not self.user_build_configurations:
                raise UnknownConfigurationError(str(self), None, [])
            configuration_name = next(iter(self.user_build_configurations))
        if configuration_name not in self.user_build_configurations:
            raise UnknownConfigurationError(
                str(self), configuration_name, self.user_build_configurations.keys()
            )
        if configuration_name not in self._build_settings:
            logger.debug("creating %s build settings for %s", configuration_name, self)
            self._build_settings[configuration_name] = self.create_build_settings(
                configuration_name, self.user_build_configurations[configuration_name]
            )
        return self._build_settings[configuration_name]

    def create_build_settings(self, configuration_name: str, configuration: str):
        if self._settings_factory is None:
            raise RuntimeError(
                f"{type(self).__name__} requires a settings factory to create build settings"
            )
        return self._settings_factory(self, configuration_name, configuration)

    def __str__(self) -> str:
        return self.label
