"""
Error hierarchy for BlazeAuth options.
"""

from __future__ import annotations

from typing import Dict, List, Mapping


class OptionsError(Exception):
    """Base error for option configuration failures."""


class InvalidArgumentError(OptionsError, ValueError):
    """Raised when a value is rejected by an option setter."""


class UnresolvedReferenceError(OptionsError, LookupError):
    """Raised when a repository or persistence manager cannot be resolved."""


class UnknownOptionError(OptionsError, AttributeError):
    """Raised when a strict options class receives a key it does not define."""


class OptionsValidationError(OptionsError):
    """
    Aggregated validation error storing option-to-messages mapping.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        message = self._format_message()
        super().__init__(message)

    def _format_message(self) -> str:
        segments = []
        for option, messages in self.errors.items():
            prefix = option if option != "__all__" else "options"
            combined = "; ".join(messages)
            segments.append(f"{prefix}: {combined}")
        return "; ".join(segments)
