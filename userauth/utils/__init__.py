"""Utility functions for userauth.

This package provides centralized utilities for common operations.
Import convention: use module-level imports for clarity.

    from userauth.utils import isodatetime, uid
    timestamp = isodatetime.now()
    age = isodatetime.years_between(birth_date, isodatetime.today())
    user_id = uid.generate_uuid()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
