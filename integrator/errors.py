"""Exceptions raised while planning an integration.

Every error is raised at the point of detection and carries the label and
identifiers needed to report a precise diagnostic.
"""

from typing import Iterable, List, Optional


class IntegratorError(Exception):
    """Base exception for all integrator errors."""


class InvalidTargetDefinitionError(IntegratorError, ValueError):
    """Raised when an aggregate target is built from a missing or abstract definition."""


class InconsistentTargetKindError(IntegratorError, ValueError):
    """Raised when the user targets of one aggregate have different product types."""

    def __init__(self, label: str, symbol_types: Iterable[str]):
        self.label = label
        self.symbol_types: List[str] = list(symbol_types)
        super().__init__(
            f"Expected single kind of user_target for {label}. "
            f"Found {', '.join(self.symbol_types)}."
        )


class BrokenReferenceError(IntegratorError, RuntimeError):
    """Raised when a user target identifier is missing from the user project."""

    def __init__(self, uuid: str, label: str):
        self.uuid = uuid
        self.label = label
        super().__init__(
            f"[Bug] Unable to find the target with the `{uuid}` UUID "
            f"for the `{label}` integration library"
        )


class UnknownConfigurationError(IntegratorError, ValueError):
    """Raised when a build configuration is not one of the recognized names."""

    def __init__(self, owner: str, name: Optional[str], available: Iterable[str]):
        self.owner = owner
        self.name = name
        self.available: List[str] = list(available)
        if name is None:
            message = f"{owner} does not contain any build settings"
        else:
            message = (
                f"{owner} does not contain a build setting for the {name!r} "
                f"configuration, only {self.available!r}"
            )
        super().__init__(message)


class PlanError(IntegratorError, RuntimeError):
    """Raised when a plan file declares duplicate or dangling names."""
