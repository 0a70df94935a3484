"""Small helpers: random identifiers and file checks."""

from __future__ import annotations

import os
import random
import string

LETTERS = string.ascii_lowercase + string.ascii_uppercase


def rand_string(n: int) -> str:
    """A random string of ``n`` ASCII letters."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    return "".join(random.choices(LETTERS, k=n))


def file_exists(location: str | os.PathLike) -> bool:
    """Whether ``location`` names an existing file or directory."""
    try:
        os.stat(location)
    except (OSError, ValueError):
        return False
    return True