"""Shared test fixtures."""

from pathlib import Path

import pytest

from integrator.details.build_type import BuildType
from integrator.details.project import NativeTarget, ProductType, UserProject
from integrator.details.sandbox import Sandbox
from integrator.details.specification import Specification, SpecType
from integrator.details.target_definition import Manifest, TargetDefinition
from integrator.details.targets.aggregate_target import AggregateTarget
from integrator.details.targets.component_target import ComponentTarget

CLIENT_ROOT = Path("/project")
SANDBOX_ROOT = Path("/project/Pods")
CONFIGURATIONS = {"Debug": "debug", "Release": "release"}


@pytest.fixture
def sandbox() -> Sandbox:
    return Sandbox(SANDBOX_ROOT)


@pytest.fixture
def manifest() -> Manifest:
    return Manifest(defined_in_file=CLIENT_ROOT / "Podfile")


@pytest.fixture
def make_component():
    """Build a component target with a single library spec named after it.

    Usage:
        make_component("Alamofire", resources=["Alamofire/a.png"])
    """

    def _make(
        name: str,
        build_type: BuildType = BuildType.static_library(),
        should_build: bool = True,
        resources=(),
        frameworks=(),
        xcframeworks=(),
        on_demand_resources=None,
        test_resources=(),
        uses_swift: bool = False,
    ) -> ComponentTarget:
        test_spec = f"{name}/Tests"
        return ComponentTarget(
            name=name,
            specs=[Specification(name), Specification(test_spec, SpecType.TEST)],
            build_type=build_type,
            should_build=should_build,
            resource_paths={name: list(resources), test_spec: list(test_resources)},
            framework_paths={name: list(frameworks)},
            xcframeworks={name: list(xcframeworks)},
            on_demand_resources={name: on_demand_resources or {}},
            uses_swift=uses_swift,
        )

    return _make


@pytest.fixture
def make_aggregate(sandbox: Sandbox, manifest: Manifest):
    """Build an aggregate target from a configuration -> component targets mapping."""

    def _make(
        components_by_config,
        label: str = "Pods-App",
        user_project=None,
        user_target_uuids=(),
        target_manifest=None,
        configurations=None,
    ) -> AggregateTarget:
        return AggregateTarget(
            sandbox,
            BuildType.static_library(),
            configurations if configurations is not None else CONFIGURATIONS,
            ["arm64"],
            "ios",
            TargetDefinition(label, target_manifest or manifest),
            CLIENT_ROOT,
            user_project,
            list(user_target_uuids),
            components_by_config,
        )

    return _make


@pytest.fixture
def user_project() -> UserProject:
    return UserProject(
        path=CLIENT_ROOT / "App.xcodeproj",
        targets=[
            NativeTarget("App", ProductType.APPLICATION),
            NativeTarget("Widget", ProductType.APP_EXTENSION),
            NativeTarget("Kit", ProductType.FRAMEWORK),
            NativeTarget("Core", ProductType.STATIC_LIBRARY),
            NativeTarget("Service", ProductType.XPC_SERVICE),
        ],
    )


@pytest.fixture
def write_plan(tmp_path: Path):
    """Write a PLAN.integrator file into a temporary workspace and return its root."""

    def _write(content: str) -> Path:
        (tmp_path / "PLAN.integrator").write_text(content, encoding="utf-8")
        return tmp_path

    return _write
