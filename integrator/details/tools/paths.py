from typing import List

from integrator.details.workspace import Workspace


def paths_main(workspace: Workspace, targets: List[str], command_args: List[str]):
    assert not command_args
    for target in workspace.select(targets):
        print(f"{target.label}:")
        print(f"  support files: {target.support_files_dir.as_posix()}")
        print(f"  acknowledgements: {target.acknowledgements_basepath.as_posix()}")
        print(f"  resources script: {target.copy_resources_script_relative_path}")
        print(f"    inputs: {target.copy_resources_script_input_files_relative_path}")
        print(f"    outputs: {target.copy_resources_script_output_files_relative_path}")
        print(f"  frameworks script: {target.embed_frameworks_script_relative_path}")
        print(f"    inputs: {target.embed_frameworks_script_input_files_relative_path}")
        print(f"    outputs: {target.embed_frameworks_script_output_files_relative_path}")
        print(f"  manifest lock result: {target.check_manifest_lock_script_output_file_path}")
        print(f"  sandbox root: {target.relative_sandbox_root}")
        print(f"  manifest dir: {target.manifest_dir_relative_path}")
        for config in target.user_build_configurations:
            print(f"  {config} xcconfig: {target.xcconfig_relative_path(config)}")
        if target.search_paths_aggregate_targets:
            labels = ", ".join(t.label for t in target.search_paths_aggregate_targets)
            print(f"  search paths from: {labels}")
