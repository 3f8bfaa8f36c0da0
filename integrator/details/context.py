from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from integrator import Config
from integrator.details.build_type import BuildType
from integrator.details.project import NativeTarget, ProductType, UserProject
from integrator.details.specification import Specification, SpecType
from integrator.details.target_definition import Manifest
from integrator.details.targets.component_target import (
    ComponentTarget,
    FrameworkPaths,
    XCFramework,
)
from integrator.errors import PlanError

# Artifact declarations: a plain list belongs to the target's main spec
ArtifactDecl = Union[List[str], Dict[str, List[str]]]


@dataclass
class AggregateDeclaration:
    label: str
    components: Dict[str, List[str]]
    user_targets: List[str] = field(default_factory=list)
    abstract: bool = False
    embedded_in: Optional[str] = None
    search_paths: List[str] = field(default_factory=list)
    application_extension_api_only: bool = False
    build_library_for_distribution: bool = False


def _by_spec(name: str, value: Optional[ArtifactDecl]) -> Dict[str, list]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return {k: list(v) for k, v in value.items()}
    return {name: list(value)}


class Context:
    def __init__(self, root: Path):
        self.root = root


class PlanContext(Context):
    FILENAME = "PLAN.integrator"
    MODULENAME = "plan"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.config: Optional[Config] = None
        self.manifest_decl = Manifest()
        self.component_targets: Dict[str, ComponentTarget] = {}
        self.user_project_decl: Optional[UserProject] = None
        self.aggregate_targets: Dict[str, AggregateDeclaration] = {}

    def configure(self, **kwargs):
        if self.config is not None:
            raise PlanError("plan has already been configured")
        self.config = Config(**kwargs)

    def manifest(self, path: Optional[str] = None, generate_bridge_support: bool = False):
        self.manifest_decl = Manifest(
            defined_in_file=self.root.joinpath(path) if path else None,
            generate_bridge_support=generate_bridge_support,
        )

    def component_target(
        self,
        *,
        name: str,
        build_type: str = "static_library",
        specs: Optional[List[str]] = None,
        test_specs: Sequence[str] = (),
        app_specs: Sequence[str] = (),
        resources: Optional[ArtifactDecl] = None,
        frameworks: Optional[ArtifactDecl] = None,
        xcframeworks: Optional[ArtifactDecl] = None,
        on_demand_resources: Optional[Dict[str, Dict[str, List[str]]]] = None,
        **kwargs,
    ):
        if name in self.component_targets:
            raise PlanError(f"component target {name} has already been declared")
        library_specs = specs if specs is not None else [name]
        self.component_targets[name] = ComponentTarget(
            name=name,
            specs=[
                *(Specification(s) for s in library_specs),
                *(Specification(s, SpecType.TEST) for s in test_specs),
                *(Specification(s, SpecType.APP) for s in app_specs),
            ],
            build_type=BuildType.from_name(build_type),
            resource_paths=_by_spec(name, resources),
            framework_paths={
                spec: [FrameworkPaths(p) for p in paths]
                for spec, paths in _by_spec(name, frameworks).items()
            },
            xcframeworks={
                spec: [XCFramework(p) for p in paths]
                for spec, paths in _by_spec(name, xcframeworks).items()
            },
            on_demand_resources=on_demand_resources or {},
            **kwargs,
        )

    def user_project(self, path: str, targets: Dict[str, str]):
        if self.user_project_decl is not None:
            raise PlanError("user project has already been declared")
        self.user_project_decl = UserProject(
            path=self.root.joinpath(path),
            targets=[
                NativeTarget(name, ProductType.from_identifier(kind))
                for name, kind in targets.items()
            ],
        )

    def aggregate_target(self, *, label: str, **kwargs):
        if label in self.aggregate_targets:
            raise PlanError(f"aggregate target {label} has already been declared")
        self.aggregate_targets[label] = AggregateDeclaration(label=label, **kwargs)
