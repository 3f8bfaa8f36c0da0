# User project model.
#
# The integrator only needs to know which native targets exist in the user's
# project and what kind of product each of them builds. Product types form a
# closed set so classification never depends on open-ended project data.

import uuid

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


def generate_id(key: str) -> str:
    return uuid.uuid5(uuid.NAMESPACE_X500, key).hex.upper()[:24]


# Product types used in PBXNativeTarget
class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    FRAMEWORK = "com.apple.product-type.framework"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    BUNDLE = "com.apple.product-type.bundle"
    UNIT_TEST_BUNDLE = "com.apple.product-type.bundle.unit-test"
    UI_TEST_BUNDLE = "com.apple.product-type.bundle.ui-testing"
    APP_EXTENSION = "com.apple.product-type.app-extension"
    COMMAND_LINE_TOOL = "com.apple.product-type.tool"
    WATCH_APP = "com.apple.product-type.application.watchapp"
    WATCH2_APP = "com.apple.product-type.application.watchapp2"
    WATCH2_APP_CONTAINER = "com.apple.product-type.application.watchapp2-container"
    WATCH_EXTENSION = "com.apple.product-type.watchkit-extension"
    WATCH2_EXTENSION = "com.apple.product-type.watchkit2-extension"
    TV_EXTENSION = "com.apple.product-type.tv-app-extension"
    MESSAGES_APPLICATION = "com.apple.product-type.application.messages"
    MESSAGES_EXTENSION = "com.apple.product-type.app-extension.messages"
    STICKER_PACK = "com.apple.product-type.app-extension.messages-sticker-pack"
    XPC_SERVICE = "com.apple.product-type.xpc-service"

    @property
    def symbol(self) -> str:
        return self.name.lower()

    @staticmethod
    def from_identifier(value: str) -> "ProductType":
        """Accept either a product type identifier or its symbol name."""
        for product_type in ProductType:
            if value in (product_type.value, product_type.symbol):
                return product_type
        raise ValueError(f"unknown product type {value!r}")


@dataclass
class NativeTarget:
    name: str
    product_type: ProductType
    uuid: str = field(init=False)

    def __post_init__(self) -> None:
        self.uuid = generate_id(f"PBXNativeTarget:{self.name}")

    @property
    def symbol_type(self) -> str:
        return self.product_type.symbol


@dataclass
class UserProject:
    path: Optional[Path]
    targets: List[NativeTarget] = field(default_factory=list)

    @property
    def objects_by_uuid(self) -> Dict[str, NativeTarget]:
        return {target.uuid: target for target in self.targets}

    def find_target(self, name: str) -> NativeTarget:
        for target in self.targets:
            if target.name == name:
                return target
        raise KeyError(f"user project has no target named {name!r}")
