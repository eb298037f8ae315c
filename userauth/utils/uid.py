"""User ID generation.

Record IDs are opaque UUID v4 strings chosen by the store at insert time.
Only this module imports uuid; everything else calls uid.generate_uuid().
"""

from uuid import uuid4


def generate_uuid() -> str:
    """Generate a random UUID v4 as a string."""
    return str(uuid4())
