"""Primary key generation."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """New CUID2 for tenant, user profile, work item and notification ids."""
    return str(_next_cuid())
