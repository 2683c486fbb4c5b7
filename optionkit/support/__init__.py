"""
Write-side sanitizing and validation, read-side resolution of option values
"""
from optionkit.support.default_resolution import DefaultResolutionState, PendingState, PendingStatus
from optionkit.support.resolver import OutputResolver
from optionkit.support.sanitizer import ENVELOPE_MARKER, InputSanitizer, is_envelope, unwrap
from optionkit.support.validator import InputValidator, compile_constraint

__all__ = [
    "DefaultResolutionState",
    "ENVELOPE_MARKER",
    "InputSanitizer",
    "InputValidator",
    "OutputResolver",
    "PendingState",
    "PendingStatus",
    "compile_constraint",
    "is_envelope",
    "unwrap",
]
