import logging

from graphlib import CycleError, TopologicalSorter
from importlib.machinery import SourceFileLoader
from importlib.util import spec_from_loader, module_from_spec
from pathlib import Path
from typing import Dict, Iterator, List

from integrator.details.as_iterator import str_iter
from integrator.details.build_type import BuildType
from integrator.details.context import AggregateDeclaration, PlanContext
from integrator.details.sandbox import Sandbox
from integrator.details.target_definition import TargetDefinition
from integrator.details.targets.aggregate_target import AggregateTarget
from integrator.details.targets.component_target import ComponentTarget
from integrator.errors import PlanError

logger = logging.getLogger(__name__)


def load_user_module(ctx: PlanContext):
    module_name = ".".join(["integrator", "workspace", ctx.MODULENAME])
    module_path = ctx.root.joinpath(ctx.FILENAME)
    spec = spec_from_loader(
        module_name, SourceFileLoader(module_name, str(module_path))
    )
    if not spec or not spec.loader:
        raise RuntimeError(f"failed to load module spec {module_path}")
    plan_module = module_from_spec(spec)
    setattr(plan_module, "CTX", ctx)
    spec.loader.exec_module(plan_module)


class Workspace:
    def __init__(self, workspace_root: Path = Path(".")):
        self.root = Path(workspace_root).resolve()
        ctx = PlanContext(self.root)
        load_user_module(ctx)
        if ctx.config is None:
            raise PlanError(f"{ctx.FILENAME} never calls CTX.configure()")
        self.config = ctx.config
        self.sandbox = Sandbox(self.root.joinpath(self.config.sandbox_root))
        self.client_root = self.root.joinpath(self.config.client_root)
        self.manifest = ctx.manifest_decl
        self.user_project = ctx.user_project_decl
        self.component_targets = ctx.component_targets
        self.aggregate_targets: Dict[str, AggregateTarget] = {
            label: self._create_aggregate_target(decl)
            for label, decl in ctx.aggregate_targets.items()
        }
        self._merge_embedded_targets(ctx.aggregate_targets)
        for label, decl in ctx.aggregate_targets.items():
            self.aggregate_targets[label].search_paths_aggregate_targets.extend(
                self.find_aggregate_target(name) for name in decl.search_paths
            )

    @property
    def targets(self) -> Iterator[AggregateTarget]:
        yield from self.aggregate_targets.values()

    def find_aggregate_target(self, label: str) -> AggregateTarget:
        if label not in self.aggregate_targets:
            raise PlanError(f"unknown aggregate target {label}")
        return self.aggregate_targets[label]

    def select(self, labels: List[str]) -> List[AggregateTarget]:
        if not labels:
            return list(self.targets)
        return [self.find_aggregate_target(label) for label in labels]

    def _find_component_target(self, name: str, owner: str) -> ComponentTarget:
        if name not in self.component_targets:
            raise PlanError(f"aggregate target {owner} references unknown component target {name}")
        return self.component_targets[name]

    def _create_aggregate_target(self, decl: AggregateDeclaration) -> AggregateTarget:
        user_target_uuids = []
        if decl.user_targets:
            if self.user_project is None:
                raise PlanError(f"aggregate target {decl.label} names user targets without a user project")
            for name in decl.user_targets:
                try:
                    user_target_uuids.append(self.user_project.find_target(name).uuid)
                except KeyError as e:
                    raise PlanError(f"aggregate target {decl.label}: {e.args[0]}") from None
        target = AggregateTarget(
            self.sandbox,
            BuildType.from_name(self.config.build_type),
            self.config.build_configurations,
            list(str_iter(self.config.architecture)),
            self.config.platform,
            TargetDefinition(decl.label, self.manifest, abstract=decl.abstract),
            self.client_root,
            self.user_project,
            user_target_uuids,
            {
                config: [self._find_component_target(n, decl.label) for n in names]
                for config, names in decl.components.items()
            },
        )
        if decl.application_extension_api_only:
            target.mark_application_extension_api_only()
        if decl.build_library_for_distribution:
            target.mark_build_library_for_distribution()
        return target

    # Fold component targets of embedded aggregates into their hosts, innermost
    # embeddings first so nested embeddings reach the outermost host...
    def _merge_embedded_targets(self, decls: Dict[str, AggregateDeclaration]):
        embedded: Dict[str, List[str]] = {label: [] for label in decls}
        for label, decl in decls.items():
            if decl.embedded_in is None:
                continue
            if decl.embedded_in not in decls:
                raise PlanError(f"aggregate target {label} is embedded in unknown target {decl.embedded_in}")
            embedded[decl.embedded_in].append(label)
        sorter: TopologicalSorter = TopologicalSorter()
        for host, labels in embedded.items():
            sorter.add(host, *labels)
        try:
            order = list(sorter.static_order())
        except CycleError as e:
            raise PlanError(f"aggregate targets are embedded in each other: {e.args[1]}") from None
        for host in order:
            for label in embedded[host]:
                logger.debug("merging component targets of %s into %s", label, host)
                self.aggregate_targets[host] = self.aggregate_targets[
                    host
                ].merge_embedded_component_targets(
                    self.aggregate_targets[label].component_targets_by_build_configuration
                )
