"""Correlation ids for generation results."""

from __future__ import annotations

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str, suffix_length: int = 6) -> str:
    """Return ``<prefix>-<epoch millis>-<random base-36 suffix>``.

    Unique enough for correlating log lines; not a security token.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ALPHABET, k=suffix_length))
    return f"{prefix}-{millis}-{suffix}"
