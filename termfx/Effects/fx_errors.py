# fx_errors.py
# Description: Error types raised while building or configuring effects
#
"""
Effect Error Handling
---------------------

Effects are pure computation over a buffer, so the error surface is narrow:
everything that can go wrong is detected when an effect is constructed.

- Invalid configuration (bad gradient length, threshold, loop on a zero
  duration timer, ...)
- Negative durations
- Empty sequence/parallel compositions
- Unknown names coming from config files or callers
"""

from enum import Enum
from typing import Iterable, Optional


class ErrorCategory(Enum):
    """Categories of effect errors."""
    CONFIGURATION = "configuration"
    DURATION = "duration"
    COMPOSITION = "composition"
    LOOKUP = "lookup"


class EffectError(Exception):
    """Base exception for the effects engine."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def get_user_message(self) -> str:
        """Get user-friendly error message."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


class EffectConfigurationError(EffectError, ValueError):
    """An effect, shader or pattern was constructed with invalid parameters."""

    @staticmethod
    def negative_parameter(name: str, value) -> 'EffectConfigurationError':
        return EffectConfigurationError(
            f"'{name}' must be non-negative, got {value!r}",
            suggestion=f"Pass a value >= 0 for '{name}'"
        )

    @staticmethod
    def out_of_unit_range(name: str, value) -> 'EffectConfigurationError':
        return EffectConfigurationError(
            f"'{name}' must be within [0.0, 1.0], got {value!r}"
        )


class InvalidDurationError(EffectConfigurationError):
    """A duration would have become negative."""

    category = ErrorCategory.DURATION

    @staticmethod
    def negative(milliseconds) -> 'InvalidDurationError':
        return InvalidDurationError(
            f"Duration cannot be negative (got {milliseconds}ms)",
            suggestion="Clamp tick deltas to zero before handing them to the effects engine"
        )


class EmptyCompositeError(EffectConfigurationError):
    """A sequence or parallel composition was built without children."""

    category = ErrorCategory.COMPOSITION

    @staticmethod
    def for_kind(kind: str) -> 'EmptyCompositeError':
        return EmptyCompositeError(
            f"A {kind} effect needs at least one child effect",
            suggestion=f"Pass one or more effects to {kind}(...)"
        )


class UnknownNameError(EffectConfigurationError, KeyError):
    """A named interpolation, color space or shader does not exist."""

    category = ErrorCategory.LOOKUP

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message

    @staticmethod
    def for_lookup(kind: str, name: str, available: Iterable[str]) -> 'UnknownNameError':
        choices = ", ".join(sorted(available))
        return UnknownNameError(
            f"Unknown {kind} '{name}'",
            suggestion=f"Use one of: {choices}"
        )
