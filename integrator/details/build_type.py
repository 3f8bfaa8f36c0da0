from dataclasses import dataclass
from enum import Enum


class Linkage(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


class Packaging(Enum):
    LIBRARY = "library"
    FRAMEWORK = "framework"


# How a target is built: static/dynamic linkage crossed with library/framework packaging
@dataclass(frozen=True)
class BuildType:
    linkage: Linkage
    packaging: Packaging

    @staticmethod
    def static_library() -> "BuildType":
        return BuildType(Linkage.STATIC, Packaging.LIBRARY)

    @staticmethod
    def dynamic_library() -> "BuildType":
        return BuildType(Linkage.DYNAMIC, Packaging.LIBRARY)

    @staticmethod
    def static_framework() -> "BuildType":
        return BuildType(Linkage.STATIC, Packaging.FRAMEWORK)

    @staticmethod
    def dynamic_framework() -> "BuildType":
        return BuildType(Linkage.DYNAMIC, Packaging.FRAMEWORK)

    @staticmethod
    def from_name(name: str) -> "BuildType":
        """
        Parse a build type name such as "static_library" or "dynamic_framework".

        Raises:
            ValueError: If the name is not one of the four known build types.
        """
        linkage, _, packaging = name.partition("_")
        try:
            return BuildType(Linkage(linkage), Packaging(packaging))
        except ValueError:
            raise ValueError(f"unknown build type {name!r}") from None

    @property
    def name(self) -> str:
        return f"{self.linkage.value}_{self.packaging.value}"

    @property
    def is_static(self) -> bool:
        return self.linkage == Linkage.STATIC

    @property
    def is_dynamic(self) -> bool:
        return self.linkage == Linkage.DYNAMIC

    @property
    def is_library(self) -> bool:
        return self.packaging == Packaging.LIBRARY

    @property
    def is_framework(self) -> bool:
        return self.packaging == Packaging.FRAMEWORK

    @property
    def is_static_library(self) -> bool:
        return self.is_static and self.is_library

    @property
    def is_dynamic_library(self) -> bool:
        return self.is_dynamic and self.is_library

    @property
    def is_static_framework(self) -> bool:
        return self.is_static and self.is_framework

    @property
    def is_dynamic_framework(self) -> bool:
        return self.is_dynamic and self.is_framework

    def __str__(self) -> str:
        return self.name
