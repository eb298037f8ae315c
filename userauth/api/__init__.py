"""HTTP boundary helpers shared by the userauth blueprints."""

from .validation import validate_request

__all__ = ["validate_request"]
