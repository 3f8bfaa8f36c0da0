# Aggregate target.
#
# An aggregate target clusters the component targets integrated into one user
# target. Per build configuration it works out which frameworks, xcframeworks
# and resources have to be embedded or copied, and it names every support file
# generated for the integration. Derived lists are computed once and never
# mutated afterwards; folding in more component targets produces a new
# aggregate target instead.

import logging

from functools import cached_property
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from integrator.details import host_integration, support_files
from integrator.details.as_iterator import compact, unique
from integrator.details.build_settings import AggregateTargetSettings
from integrator.details.build_type import BuildType
from integrator.details.project import NativeTarget, UserProject
from integrator.details.resources import compiled_resource_path
from integrator.details.sandbox import Sandbox
from integrator.details.specification import Specification
from integrator.details.target_definition import Manifest, TargetDefinition
from integrator.details.targets.component_target import (
    ComponentTarget,
    FrameworkPaths,
    XCFramework,
)
from integrator.details.targets.target import SettingsFactory, Target
from integrator.errors import InvalidTargetDefinitionError, UnknownConfigurationError

logger = logging.getLogger(__name__)


class AggregateTarget(Target):
    def __init__(
        self,
        sandbox: Sandbox,
        build_type: BuildType,
        user_build_configurations: Dict[str, str],
        archs: List[str],
        platform: str,
        target_definition: TargetDefinition,
        client_root: Path,
        user_project: Optional[UserProject],
        user_target_uuids: Sequence[str],
        component_targets_for_build_configuration: Dict[str, List[ComponentTarget]],
        settings_factory: Optional[SettingsFactory] = None,
    ):
        super().__init__(
            sandbox=sandbox,
            build_type=build_type,
            user_build_configurations=user_build_configurations,
            archs=archs,
            platform=platform,
            settings_factory=settings_factory or AggregateTargetSettings,
        )
        if target_definition is None:
            raise InvalidTargetDefinitionError(
                "Can't initialize an AggregateTarget without a TargetDefinition!"
            )
        if target_definition.abstract:
            raise InvalidTargetDefinitionError(
                "Can't initialize an AggregateTarget with an abstract TargetDefinition!"
            )
        self.target_definition = target_definition
        self.client_root = Path(client_root)
        self.user_project = user_project
        self.user_target_uuids = list(user_target_uuids)
        # Every recognized configuration gets a list, declaration order first
        by_config: Dict[str, List[ComponentTarget]] = {
            name: list(component_targets_for_build_configuration.get(name, []))
            for name in self.user_build_configurations
        }
        for name, targets in component_targets_for_build_configuration.items():
            by_config.setdefault(name, list(targets))
        self._component_targets_for_build_configuration = by_config
        self.component_targets: List[ComponentTarget] = unique(
            t for targets in by_config.values() for t in targets
        )
        self.search_paths_aggregate_targets: List["AggregateTarget"] = []

    def merge_embedded_component_targets(
        self, embedded_component_targets: Dict[str, List[ComponentTarget]]
    ) -> "AggregateTarget":
        """
        Fold in the component targets of embedded aggregate targets.

        Args:
            embedded_component_targets: Additional component targets per
                build configuration.

        Returns:
            A new aggregate target whose per-configuration lists are the
            original targets followed by the new ones, without duplicates.
            This instance is left untouched.
        """
        merged = {
            name: list(targets)
            for name, targets in self._component_targets_for_build_configuration.items()
        }
        for name, targets in embedded_component_targets.items():
            merged[name] = unique([*merged.get(name, []), *targets])
        aggregate_target = AggregateTarget(
            self.sandbox,
            self.build_type,
            self.user_build_configurations,
            self.archs,
            self.platform,
            self.target_definition,
            self.client_root,
            self.user_project,
            self.user_target_uuids,
            merged,
            settings_factory=self._settings_factory,
        )
        aggregate_target.search_paths_aggregate_targets.extend(self.search_paths_aggregate_targets)
        if self.application_extension_api_only:
            aggregate_target.mark_application_extension_api_only()
        if self.build_library_for_distribution:
            aggregate_target.mark_build_library_for_distribution()
        return aggregate_target

    @property
    def label(self) -> str:
        return str(self.target_definition.label)

    @property
    def manifest(self) -> Manifest:
        return self.target_definition.manifest

    @property
    def user_project_path(self) -> Optional[Path]:
        return self.user_project.path if self.user_project else None

    @property
    def component_targets_by_build_configuration(self) -> Dict[str, List[ComponentTarget]]:
        return {name: list(targets) for name, targets in self._component_targets_for_build_configuration.items()}

    def component_targets_for_build_configuration(self, build_configuration: str) -> List[ComponentTarget]:
        self._check_configuration(build_configuration)
        return list(self._component_targets_for_build_configuration[build_configuration])

    @property
    def specs(self) -> List[Specification]:
        return [spec for target in self.component_targets for spec in target.specs]

    def specs_by_build_configuration(self) -> Dict[str, List[Specification]]:
        return {
            name: [
                spec
                for target in self.component_targets_for_build_configuration(name)
                for spec in target.specs
            ]
            for name in self.user_build_configurations
        }

    @property
    def uses_swift(self) -> bool:
        return any(target.uses_swift for target in self.component_targets)

    # ------------------------------------------------------------------
    # User target classification

    def user_targets(self) -> List[NativeTarget]:
        return host_integration.resolve_user_targets(
            self.user_project, self.user_target_uuids, self.label
        )

    def is_library(self) -> bool:
        """True if the user targets build a framework, static or dynamic library."""
        return host_integration.is_library(self.user_project, self.user_target_uuids, self.label)

    def requires_host_target(self) -> bool:
        """True if the user targets must be embedded in a host application."""
        return host_integration.requires_host_target(
            self.user_project, self.user_target_uuids, self.label
        )

    # ------------------------------------------------------------------
    # Aggregated artifacts

    @property
    def includes_resources(self) -> bool:
        return any(self.resource_paths_by_config.values())

    @property
    def includes_on_demand_resources(self) -> bool:
        return bool(self.on_demand_resources)

    @property
    def includes_frameworks(self) -> bool:
        return any(self.framework_paths_by_config.values())

    @property
    def includes_xcframeworks(self) -> bool:
        return any(self.xcframeworks_by_config.values())

    def framework_paths(self, build_configuration: str) -> Tuple[FrameworkPaths, ...]:
        self._check_configuration(build_configuration)
        return self.framework_paths_by_config[build_configuration]

    def xcframework_paths(self, build_configuration: str) -> Tuple[XCFramework, ...]:
        self._check_configuration(build_configuration)
        return self.xcframeworks_by_config[build_configuration]

    def resource_paths(self, build_configuration: str) -> Tuple[str, ...]:
        self._check_configuration(build_configuration)
        return self.resource_paths_by_config[build_configuration]

    @cached_property
    def framework_paths_by_config(self) -> Dict[str, Tuple[FrameworkPaths, ...]]:
        return {
            config: self._library_artifacts(config, lambda t: t.framework_paths)
            for config in self.user_build_configurations
        }

    @cached_property
    def xcframeworks_by_config(self) -> Dict[str, Tuple[XCFramework, ...]]:
        return {
            config: self._library_artifacts(config, lambda t: t.xcframeworks)
            for config in self.user_build_configurations
        }

    @cached_property
    def resource_paths_by_config(self) -> Dict[str, Tuple[str, ...]]:
        # Resources of built dynamic frameworks live in the framework bundle
        relevant_targets = []
        for target in self.component_targets:
            if target.should_build and target.build_as_dynamic_framework:
                logger.debug("%s: resources of %s are embedded in its framework", self.label, target.name)
                continue
            relevant_targets.append(target)
        bridge_support_file = self.bridge_support_file
        resources_by_config = {}
        for config in self.user_build_configurations:
            active = set(self._component_targets_for_build_configuration[config])
            resource_paths: List[str] = []
            for target in relevant_targets:
                if target not in active:
                    continue
                paths = [
                    path
                    for spec_name in target.library_spec_names
                    for path in target.resource_paths.get(spec_name, [])
                ]
                if target.build_as_static_framework:
                    built_product_dir = target.build_product_path(
                        support_files.BUILT_PRODUCTS_DIR_VARIABLE
                    )
                    paths = [compiled_resource_path(p, built_product_dir) for p in paths]
                paths.append(bridge_support_file)
                resource_paths.extend(paths)
            resources_by_config[config] = tuple(unique(compact(resource_paths)))
        return resources_by_config

    @cached_property
    def on_demand_resources(self) -> Tuple[str, ...]:
        # Integrated once through the user target's resources phase, not per configuration
        return tuple(
            unique(
                path
                for target in self.component_targets
                for spec_name in target.library_spec_names
                for paths in target.on_demand_resources.get(spec_name, {}).values()
                for path in paths
            )
        )

    @property
    def bridge_support_file(self) -> Optional[str]:
        if not self.manifest.generate_bridge_support:
            return None
        return support_files.relative_path(self.bridge_support_path, self.sandbox.root)

    def _library_artifacts(self, build_configuration: str, artifacts_of) -> tuple:
        artifacts = [
            artifact
            for target in self._component_targets_for_build_configuration[build_configuration]
            for spec_name in target.library_spec_names
            for artifact in artifacts_of(target).get(spec_name, [])
        ]
        return tuple(unique(compact(artifacts)))

    def _check_configuration(self, build_configuration: str):
        if build_configuration not in self.user_build_configurations:
            raise UnknownConfigurationError(
                self.label, build_configuration, self.user_build_configurations.keys()
            )

    # ------------------------------------------------------------------
    # Support files

    @property
    def acknowledgements_basepath(self) -> Path:
        return support_files.acknowledgements_basepath(self.support_files_dir, self.label)

    @property
    def copy_resources_script_path(self) -> Path:
        return support_files.script_path(self.support_files_dir, self.label, "resources")

    @property
    def embed_frameworks_script_path(self) -> Path:
        return support_files.script_path(self.support_files_dir, self.label, "frameworks")

    def copy_resources_script_input_files_path(self, configuration: str) -> Path:
        return support_files.script_file_list_path(
            self.support_files_dir, self.label, "resources", configuration, "input"
        )

    def copy_resources_script_output_files_path(self, configuration: str) -> Path:
        return support_files.script_file_list_path(
            self.support_files_dir, self.label, "resources", configuration, "output"
        )

    def embed_frameworks_script_input_files_path(self, configuration: str) -> Path:
        return support_files.script_file_list_path(
            self.support_files_dir, self.label, "frameworks", configuration, "input"
        )

    def embed_frameworks_script_output_files_path(self, configuration: str) -> Path:
        return support_files.script_file_list_path(
            self.support_files_dir, self.label, "frameworks", configuration, "output"
        )

    @property
    def check_manifest_lock_script_output_file_path(self) -> str:
        return support_files.check_manifest_lock_result_path(self.label)

    @property
    def relative_sandbox_root_path(self) -> str:
        return support_files.relative_path(self.sandbox.root, self.client_root)

    @property
    def relative_sandbox_root(self) -> str:
        return support_files.source_root_relative_path(self.sandbox.root, self.client_root)

    @property
    def manifest_dir_relative_path(self) -> str:
        return support_files.manifest_dir_relative_path(
            self.manifest.defined_in_file, self.client_root
        )

    def xcconfig_relative_path(self, configuration: str) -> str:
        return support_files.relative_path(self.xcconfig_path(configuration), self.client_root)

    @property
    def copy_resources_script_relative_path(self) -> str:
        return self._relative_to_sandbox_root(self.copy_resources_script_path)

    @property
    def copy_resources_script_input_files_relative_path(self) -> str:
        return self._relative_to_sandbox_root(
            self.copy_resources_script_input_files_path(support_files.CONFIGURATION_VARIABLE)
        )

    @property
    def copy_resources_script_output_files_relative_path(self) -> str:
        return self._relative_to_sandbox_root(
            self.copy_resources_script_output_files_path(support_files.CONFIGURATION_VARIABLE)
        )

    @property
    def embed_frameworks_script_relative_path(self) -> str:
        return self._relative_to_sandbox_root(self.embed_frameworks_script_path)

    @property
    def embed_frameworks_script_input_files_relative_path(self) -> str:
        return self._relative_to_sandbox_root(
            self.embed_frameworks_script_input_files_path(support_files.CONFIGURATION_VARIABLE)
        )

    @property
    def embed_frameworks_script_output_files_relative_path(self) -> str:
        return self._relative_to_sandbox_root(
            self.embed_frameworks_script_output_files_path(support_files.CONFIGURATION_VARIABLE)
        )

    def _relative_to_sandbox_root(self, path: Path) -> str:
        return support_files.sandbox_relative_path(path, self.sandbox.root)

    def __repr__(self) -> str:
        return f"AggregateTarget({self.label!r})"
