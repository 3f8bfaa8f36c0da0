from pathlib import Path


class Sandbox:
    SUPPORT_FILES_DIRNAME = "Target Support Files"

    def __init__(self, root: Path):
        self.root = Path(root)

    @property
    def target_support_files_root(self) -> Path:
        return self.root.joinpath(self.SUPPORT_FILES_DIRNAME)

    def target_support_files_dir(self, name: str) -> Path:
        return self.target_support_files_root.joinpath(name)

    def __repr__(self) -> str:
        return f"Sandbox({self.root.as_posix()!r})"
