from typing import List

from integrator.details.workspace import Workspace


def classify_main(workspace: Workspace, targets: List[str], command_args: List[str]):
    assert not command_args
    for target in workspace.select(targets):
        user_targets = ", ".join(t.name for t in target.user_targets()) or "-"
        print(f"{target.label}:")
        print(f"  user targets: {user_targets}")
        print(f"  library: {'yes' if target.is_library() else 'no'}")
        print(f"  requires host target: {'yes' if target.requires_host_target() else 'no'}")
