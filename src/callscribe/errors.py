"""
Exceptions raised by the Callscribe clients.

Every concrete error combines a scope (extraction or generation) with a
kind (configuration, input, transport, malformed response), so callers can
catch whichever axis they care about.
"""

from __future__ import annotations

from typing import Any, Optional


class CallscribeError(Exception):
    """Base exception for all Callscribe errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Kinds
# =============================================================================


class ConfigurationError(CallscribeError):
    """The API credential or another required setting is missing."""


class InputError(CallscribeError):
    """The transcript is blank."""


class TransportError(CallscribeError):
    """The remote call failed (network, auth, quota)."""


class MalformedResponseError(CallscribeError):
    """The response was empty or did not match the declared schema."""


# =============================================================================
# Scopes
# =============================================================================


class ExtractionError(CallscribeError):
    """Transcript analysis failed."""


class GenerationError(CallscribeError):
    """Email sequence generation failed."""


class ExtractionConfigurationError(ExtractionError, ConfigurationError):
    pass


class ExtractionInputError(ExtractionError, InputError):
    pass


class ExtractionTransportError(ExtractionError, TransportError):
    pass


class ExtractionMalformedError(ExtractionError, MalformedResponseError):
    pass


class GenerationConfigurationError(GenerationError, ConfigurationError):
    pass


class GenerationInputError(GenerationError, InputError):
    pass


class GenerationTransportError(GenerationError, TransportError):
    pass


class GenerationMalformedError(GenerationError, MalformedResponseError):
    pass
