from typing import Dict


class AggregateTargetSettings:
    """
    Settings table of one aggregate target for one build configuration.

    Only the values that locate the sandbox and the build products are
    produced here, compiler and linker settings come from the settings
    compiler that consumes this table.
    """

    def __init__(self, target, configuration_name: str, configuration: str):
        self.target = target
        self.configuration_name = configuration_name
        self.configuration = configuration

    @property
    def xcconfig(self) -> Dict[str, str]:
        settings = {
            "PODS_ROOT": self.target.relative_sandbox_root,
            "PODS_PODFILE_DIR_PATH": self.target.manifest_dir_relative_path,
            "PODS_BUILD_DIR": "${BUILD_DIR}",
            "PODS_CONFIGURATION_BUILD_DIR": "${PODS_BUILD_DIR}/$(CONFIGURATION)$(EFFECTIVE_PLATFORM_NAME)",
            "USE_RECURSIVE_SCRIPT_INPUTS_IN_SCRIPT_PHASES": "YES",
        }
        if self.target.application_extension_api_only:
            settings["APPLICATION_EXTENSION_API_ONLY"] = "YES"
        if self.target.build_library_for_distribution:
            settings["BUILD_LIBRARY_FOR_DISTRIBUTION"] = "YES"
        return settings

    def to_xcconfig(self) -> str:
        return "".join(f"{key} = {value}\n" for key, value in sorted(self.xcconfig.items()))
