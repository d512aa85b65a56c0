from __future__ import annotations


class CatchError(Exception):
    """Base class for misuse of the catch environment."""


class InvalidPhaseError(CatchError, RuntimeError):
    """Operation attempted in the wrong lifecycle phase."""


class InvalidActionError(CatchError, ValueError):
    """Action outside the legal or chance range for the current phase."""


class InvalidConfigurationError(CatchError, ValueError):
    """Board parameters that cannot describe a grid."""
