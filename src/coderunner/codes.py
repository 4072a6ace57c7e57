"""Error code constants for coderunner.

These constants prevent stringly-typed error codes and ensure
client code matches on the same values the API reports.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes reported by the resolver and the public API."""

    # Raised by the kernel
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_LANGUAGE = "UNKNOWN_LANGUAGE"

    # Raised by the request layer only
    INVALID_REQUEST = "INVALID_REQUEST"
