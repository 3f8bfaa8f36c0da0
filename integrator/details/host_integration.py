from typing import List, Optional, Sequence

from integrator.details.project import NativeTarget, ProductType, UserProject
from integrator.details.as_iterator import unique
from integrator.errors import BrokenReferenceError, InconsistentTargetKindError

# Product types where the product's frameworks must be embedded in a host target
EMBED_FRAMEWORKS_IN_HOST_TARGET_TYPES = frozenset(
    {
        ProductType.APP_EXTENSION,
        ProductType.FRAMEWORK,
        ProductType.STATIC_LIBRARY,
        ProductType.MESSAGES_EXTENSION,
        ProductType.WATCH_EXTENSION,
        ProductType.XPC_SERVICE,
    }
)

LIBRARY_TARGET_TYPES = frozenset(
    {
        ProductType.FRAMEWORK,
        ProductType.DYNAMIC_LIBRARY,
        ProductType.STATIC_LIBRARY,
    }
)


def resolve_user_targets(
    user_project: Optional[UserProject], user_target_uuids: Sequence[str], label: str
) -> List[NativeTarget]:
    if user_project is None:
        return []
    objects = user_project.objects_by_uuid
    native_targets = []
    for uuid in user_target_uuids:
        if uuid not in objects:
            raise BrokenReferenceError(uuid, label)
        native_targets.append(objects[uuid])
    return native_targets


def single_product_type(native_targets: Sequence[NativeTarget], label: str) -> ProductType:
    product_types = unique(target.product_type for target in native_targets)
    if len(product_types) != 1:
        raise InconsistentTargetKindError(label, [t.symbol for t in product_types])
    return product_types[0]


# Without a user project there is nothing to classify, so both answers are False
def is_library(
    user_project: Optional[UserProject], user_target_uuids: Sequence[str], label: str
) -> bool:
    if user_project is None:
        return False
    native_targets = resolve_user_targets(user_project, user_target_uuids, label)
    return single_product_type(native_targets, label) in LIBRARY_TARGET_TYPES


def requires_host_target(
    user_project: Optional[UserProject], user_target_uuids: Sequence[str], label: str
) -> bool:
    if user_project is None:
        return False
    native_targets = resolve_user_targets(user_project, user_target_uuids, label)
    return single_product_type(native_targets, label) in EMBED_FRAMEWORKS_IN_HOST_TARGET_TYPES
