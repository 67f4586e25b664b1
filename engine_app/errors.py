"""Error taxonomy shared by the engine and its collaborators.

Data-quality problems never raise: the engine degrades to a weaker strategy or
an empty result instead. Only an unreachable collaborator surfaces as an
exception, so callers can choose between retrying and showing a degraded UI.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for styling engine errors."""


class CollaboratorUnavailableError(EngineError):
    """Raised when an external collaborator cannot be reached."""


class StoreUnavailableError(CollaboratorUnavailableError):
    """Raised when the wardrobe or preference store fails."""


class OracleUnavailableError(CollaboratorUnavailableError):
    """Raised when the text-completion provider request fails."""


class OracleNotConfiguredError(EngineError):
    """Raised when the text-completion oracle has no credentials."""


__all__ = [
    "EngineError",
    "CollaboratorUnavailableError",
    "StoreUnavailableError",
    "OracleUnavailableError",
    "OracleNotConfiguredError",
]
