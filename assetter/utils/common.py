"""
Common utilities for the asset manager
Shared functions used across multiple modules
"""

import hashlib
import uuid
from typing import Any, Mapping

REMOTE_URL_MARKER = 'https://'


def generate_unique_name() -> str:
    """
    Generate a fresh identifier for an unnamed asset definition

    Returns:
        32 character hex string, different on every call
    """
    return uuid.uuid4().hex


def is_remote_url(url: str) -> bool:
    """
    Check whether a public file reference points at a remote https location

    Examples:
        >>> is_remote_url("HTTPS://cdn.example.com/a.js")
        True
        >>> is_remote_url("/assets/app.js")
        False
    """
    return REMOTE_URL_MARKER in str(url).lower()


def is_fixed_length_hash(algorithm: str) -> bool:
    """
    Check that a hashlib algorithm exists and produces a fixed-length digest

    Variable-length algorithms (shake_128, shake_256) report a digest size of
    0 and need a length argument for hexdigest(), so they are rejected.
    """
    try:
        return hashlib.new(algorithm).digest_size > 0
    except (TypeError, ValueError):
        return False


def is_file_list(value: Any) -> bool:
    """Check that a files entry is an ordered sequence of paths"""
    return isinstance(value, (list, tuple))


def get_first_present(data: Mapping[str, Any], keys, default: Any = None) -> Any:
    """
    Return the value of the first key present (and not None) in a mapping

    Args:
        data: Mapping to search
        keys: Candidate keys in priority order
        default: Value returned when no key is present

    Returns:
        Found value or default
    """
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default
