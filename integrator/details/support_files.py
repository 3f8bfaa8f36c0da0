import os

from pathlib import Path
from typing import Optional

# Build variables resolved by the consumer's build system
SANDBOX_ROOT_VARIABLE = "${PODS_ROOT}"
SOURCE_ROOT_VARIABLE = "${SRCROOT}"
CONFIGURATION_VARIABLE = "${CONFIGURATION}"
BUILT_PRODUCTS_DIR_VARIABLE = "${BUILT_PRODUCTS_DIR}"
DERIVED_FILE_DIR_VARIABLE = "$(DERIVED_FILE_DIR)"


def acknowledgements_basepath(support_files_dir: Path, label: str) -> Path:
    return support_files_dir.joinpath(f"{label}-acknowledgements")


def script_path(support_files_dir: Path, label: str, kind: str) -> Path:
    return support_files_dir.joinpath(f"{label}-{kind}.sh")


# kind is "resources" or "frameworks", direction is "input" or "output"
def script_file_list_path(
    support_files_dir: Path, label: str, kind: str, configuration: str, direction: str
) -> Path:
    return support_files_dir.joinpath(
        f"{label}-{kind}-{configuration}-{direction}-files.xcfilelist"
    )


def check_manifest_lock_result_path(label: str) -> str:
    return f"{DERIVED_FILE_DIR_VARIABLE}/{label}-checkManifestLockResult.txt"


def relative_path(path: Path, root: Path) -> str:
    return Path(os.path.relpath(path, root)).as_posix()


def sandbox_relative_path(path: Path, sandbox_root: Path) -> str:
    return f"{SANDBOX_ROOT_VARIABLE}/{relative_path(path, sandbox_root)}"


def source_root_relative_path(path: Path, client_root: Path) -> str:
    return f"{SOURCE_ROOT_VARIABLE}/{relative_path(path, client_root)}"


def manifest_dir_relative_path(manifest_path: Optional[Path], client_root: Path) -> str:
    if manifest_path is None:
        # Manifest not backed by a file, fall back to the sandbox parent
        return f"{SANDBOX_ROOT_VARIABLE}/.."
    manifest_dir = Path(relative_path(manifest_path, client_root)).parent
    return f"{SOURCE_ROOT_VARIABLE}/{manifest_dir.as_posix()}"
