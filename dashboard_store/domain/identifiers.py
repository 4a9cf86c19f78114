"""Short alphanumeric record identifiers."""

import secrets
import string
from collections.abc import Container

from dashboard_store.domain.exceptions import IdentifierExhaustedError

ID_ALPHABET = string.ascii_lowercase + string.digits
MIN_ID_LENGTH = 7


def generate_id(length: int = MIN_ID_LENGTH) -> str:
    """Return a random base-36 token of ``length`` characters.

    Seven characters give 36**7 (~7.8e10) combinations.
    """
    if length < MIN_ID_LENGTH:
        raise ValueError(f"id length must be at least {MIN_ID_LENGTH}, got {length}")
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def generate_unique_id(
    existing: Container[str],
    length: int = MIN_ID_LENGTH,
    max_attempts: int = 16,
) -> str:
    """Draw ids until one is not in ``existing``."""
    for _ in range(max_attempts):
        candidate = generate_id(length)
        if candidate not in existing:
            return candidate
    raise IdentifierExhaustedError(max_attempts)
