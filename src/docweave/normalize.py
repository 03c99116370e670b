"""Filesystem-safe renderings of member ids.

Member ids such as ``M:Acme.Widget.Spin(System.Int32,System.String)`` carry
characters that are invalid or awkward in file names. ``normalize_id`` maps
them to a stable, readable file stem.
"""

from __future__ import annotations

import hashlib
import re
from typing import Optional

# Invalid on Windows/POSIX, plus characters of generic and parameter syntax
_UNSAFE_CHARS = re.compile(r"[<>:\"/\\|?*\s()\[\]{},`#@~!]")

HASH_SUFFIX_LENGTH = 8


def normalize_id(
    member_id: Optional[str],
    replacement: str = "_",
    max_length: int = 128,
    lowercase: bool = False,
) -> str:
    """Render ``member_id`` as a file-name-safe string.

    Args:
        member_id: Member id to normalize
        replacement: Substitute for unsafe characters
        max_length: Longest result allowed; longer ids are truncated and
            suffixed with a short hash of the original id
        lowercase: Lowercase the result (for case-insensitive file systems)

    Raises:
        ValueError: If ``member_id`` is None or empty
    """
    if not member_id:
        raise ValueError("member_id must be a non-empty string")

    normalized = _UNSAFE_CHARS.sub(replacement, member_id)
    if replacement:
        run = re.escape(replacement)
        normalized = re.sub(f"(?:{run}){{2,}}", replacement, normalized)
        normalized = normalized.strip(replacement)

    if lowercase:
        normalized = normalized.lower()

    if len(normalized) > max_length:
        digest = hashlib.sha1(member_id.encode("utf-8")).hexdigest()[:HASH_SUFFIX_LENGTH]
        keep = max_length - HASH_SUFFIX_LENGTH - 1
        normalized = f"{normalized[:keep]}-{digest}"

    return normalized
