from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from integrator.details.build_type import BuildType
from integrator.details.specification import Specification


# Input/output paths of a framework that has to be embedded
@dataclass(frozen=True)
class FrameworkPaths:
    source_path: str
    dsym_path: Optional[str] = None
    bcsymbolmap_paths: Tuple[str, ...] = ()


@dataclass(frozen=True)
class XCFramework:
    path: str

    @property
    def name(self) -> str:
        basename = self.path.rstrip("/").rsplit("/", 1)[-1]
        return basename[: -len(".xcframework")] if basename.endswith(".xcframework") else basename


class ComponentTarget:
    """
    One independently built dependency unit.

    Component targets are resolved before aggregation and are treated as
    read-only input. Every artifact collection is keyed by the name of the
    specification that declared it so that test and app specs can be
    excluded from what gets integrated into the consumer.
    """

    def __init__(
        self,
        *,
        name: str,
        specs: List[Specification],
        build_type: BuildType = BuildType.static_library(),
        should_build: bool = True,
        resource_paths: Optional[Dict[str, List[str]]] = None,
        framework_paths: Optional[Dict[str, List[FrameworkPaths]]] = None,
        xcframeworks: Optional[Dict[str, List[XCFramework]]] = None,
        on_demand_resources: Optional[Dict[str, Dict[str, List[str]]]] = None,
        uses_swift: bool = False,
        product_module_name: Optional[str] = None,
    ):
        self.name = name
        self.specs = list(specs)
        self.build_type = build_type
        # False for components that are only vendored (prebuilt) and never compiled
        self.should_build = should_build
        self.resource_paths = dict(resource_paths or {})
        self.framework_paths = dict(framework_paths or {})
        self.xcframeworks = dict(xcframeworks or {})
        self.on_demand_resources = dict(on_demand_resources or {})
        self.uses_swift = uses_swift
        self.product_module_name = product_module_name or name.replace("-", "_")

    @property
    def label(self) -> str:
        return self.name

    @property
    def library_specs(self) -> List[Specification]:
        return [spec for spec in self.specs if spec.is_library]

    @property
    def library_spec_names(self) -> List[str]:
        return [spec.name for spec in self.library_specs]

    @property
    def build_as_dynamic_framework(self) -> bool:
        return self.build_type.is_dynamic_framework

    @property
    def build_as_static_framework(self) -> bool:
        return self.build_type.is_static_framework

    @property
    def product_name(self) -> str:
        if self.build_type.is_framework:
            return f"{self.product_module_name}.framework"
        return f"lib{self.label}.a"

    def build_product_path(self, directory: str) -> str:
        return f"{directory}/{self.label}/{self.product_name}"

    def __repr__(self) -> str:
        return f"ComponentTarget({self.name!r}, {self.build_type})"
