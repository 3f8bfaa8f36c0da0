from integrator.config import Config
from integrator.errors import (
    BrokenReferenceError,
    InconsistentTargetKindError,
    IntegratorError,
    InvalidTargetDefinitionError,
    PlanError,
    UnknownConfigurationError,
)
