from typing import List

from integrator.details.workspace import Workspace


def artifacts_main(workspace: Workspace, targets: List[str], command_args: List[str]):
    assert not command_args
    for target in workspace.select(targets):
        print(f"{target.label}:")
        for config in target.user_build_configurations:
            print(f"  {config}:")
            for framework in target.framework_paths(config):
                print(f"    framework: {framework.source_path}")
            for xcframework in target.xcframework_paths(config):
                print(f"    xcframework: {xcframework.path}")
            for resource in target.resource_paths(config):
                print(f"    resource: {resource}")
        for resource in target.on_demand_resources:
            print(f"  on-demand resource: {resource}")
