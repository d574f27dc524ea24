"""Exceptions raised by the generator and the risk models."""


class AnnuityEdaError(Exception):
    """Base class for pipeline errors."""


class InvalidArgument(AnnuityEdaError, ValueError):
    """Generator configuration is unusable (e.g. a non-positive policy count)."""


class ConvergenceError(AnnuityEdaError, RuntimeError):
    """The GLM optimiser did not converge."""


class SchemaMismatch(AnnuityEdaError, ValueError):
    """Input columns or categorical levels do not match the fitted model."""
