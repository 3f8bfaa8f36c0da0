from dataclasses import dataclass
from enum import Enum


class SpecType(Enum):
    LIBRARY = "library"
    TEST = "test"
    APP = "app"


@dataclass(frozen=True)
class Specification:
    name: str
    spec_type: SpecType = SpecType.LIBRARY

    @property
    def is_library(self) -> bool:
        return self.spec_type == SpecType.LIBRARY
