"""
Error taxonomy for the wind zone engine.

Only the errors below abort a calculation. Every other irregularity is
returned as a tagged warning string inside a valid result.
"""


class WindZoneError(Exception):
    """Base class for fatal wind zone calculation errors."""


class InvalidGeometryError(WindZoneError, ValueError):
    """Building dimensions missing or non-positive, or exposure unrecognized."""


class InvalidRequestError(WindZoneError, ValueError):
    """Request cannot produce a velocity pressure (no source, or a non-finite value)."""


# Warning tags prefixed to non-fatal messages
LOW_CONFIDENCE_CLASSIFICATION = "LowConfidenceClassification"
SIMPLIFIED_METHOD_EXCEEDED = "SimplifiedMethodExceeded"
COEFFICIENT_OUT_OF_RANGE = "CoefficientOutOfRange"
INVALID_VELOCITY_INPUT = "InvalidVelocityInput"


def tagged(tag: str, message: str) -> str:
    """Format a warning message with its classification tag."""
    return f"{tag}: {message}"
