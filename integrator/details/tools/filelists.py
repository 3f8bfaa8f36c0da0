import logging
import os

from pathlib import Path
from typing import Iterable, List

from integrator.details.resources import output_extension_for_resource
from integrator.details.targets.aggregate_target import AggregateTarget
from integrator.details.workspace import Workspace

logger = logging.getLogger(__name__)

RESOURCES_DESTINATION = "${TARGET_BUILD_DIR}/${UNLOCALIZED_RESOURCES_FOLDER_PATH}"
FRAMEWORKS_DESTINATION = "${TARGET_BUILD_DIR}/${FRAMEWORKS_FOLDER_PATH}"


def resource_output_paths(resource_paths: Iterable[str]) -> List[str]:
    outputs = []
    for path in resource_paths:
        stem, extension = os.path.splitext(os.path.basename(path.rstrip("/")))
        if extension == ".xcassets":
            # all asset catalogs compile into one archive
            output = f"{RESOURCES_DESTINATION}/Assets.car"
        else:
            output = f"{RESOURCES_DESTINATION}/{stem}{output_extension_for_resource(extension)}"
        if output not in outputs:
            outputs.append(output)
    return outputs


def framework_output_paths(framework_paths: Iterable[str]) -> List[str]:
    outputs = []
    for path in framework_paths:
        output = f"{FRAMEWORKS_DESTINATION}/{os.path.basename(path.rstrip('/'))}"
        if output not in outputs:
            outputs.append(output)
    return outputs


def write_file_list(path: Path, entries: List[str]):
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("writing %s", path)
    with open(path, "w") as f:
        f.write("".join(f"{entry}\n" for entry in entries))


def write_target_file_lists(target: AggregateTarget):
    for config in target.user_build_configurations:
        resources = list(target.resource_paths(config))
        if resources:
            write_file_list(
                target.copy_resources_script_input_files_path(config),
                [target.copy_resources_script_relative_path, *resources],
            )
            write_file_list(
                target.copy_resources_script_output_files_path(config),
                resource_output_paths(resources),
            )
        frameworks = [f.source_path for f in target.framework_paths(config)]
        xcframeworks = target.xcframework_paths(config)
        if frameworks or xcframeworks:
            write_file_list(
                target.embed_frameworks_script_input_files_path(config),
                [
                    target.embed_frameworks_script_relative_path,
                    *frameworks,
                    *(x.path for x in xcframeworks),
                ],
            )
            write_file_list(
                target.embed_frameworks_script_output_files_path(config),
                # each xcframework embeds the one slice matching the build
                framework_output_paths([*frameworks, *(f"{x.name}.framework" for x in xcframeworks)]),
            )


def filelists_main(workspace: Workspace, targets: List[str], command_args: List[str]):
    assert not command_args
    for target in workspace.select(targets):
        write_target_file_lists(target)
