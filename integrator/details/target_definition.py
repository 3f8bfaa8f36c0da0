from pathlib import Path
from typing import Optional


class Manifest:
    """The dependency manifest that declared the integrated targets."""

    def __init__(
        self,
        defined_in_file: Optional[Path] = None,
        generate_bridge_support: bool = False,
    ):
        # None when the manifest was synthesized in memory
        self.defined_in_file = Path(defined_in_file) if defined_in_file else None
        self.generate_bridge_support = generate_bridge_support


class TargetDefinition:
    def __init__(self, label: str, manifest: Manifest, abstract: bool = False):
        self.label = label
        self.manifest = manifest
        self.abstract = abstract

    def __repr__(self) -> str:
        return f"TargetDefinition(label={self.label!r}, abstract={self.abstract})"
