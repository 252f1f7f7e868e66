from __future__ import annotations

import base64
import binascii
import hashlib
import logging
import re
from typing import Any, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def base64_decode_lenient(value: Optional[str]) -> bytes:
    """Decode standard or URL-safe base64, ignoring padding and stray characters."""
    if not value:
        return b""
    normalized = str(value).replace("-", "+").replace("_", "/")
    normalized = _NON_BASE64.sub("", normalized)
    # A single dangling character carries no full byte.
    if len(normalized) % 4 == 1:
        normalized = normalized[:-1]
    padding = "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(normalized + padding)
    except binascii.Error as exc:
        logger.debug("Undecodable base64 %r: %s", value, exc)
        return b""


def first_present(payload: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the value of the first key that is present and not None."""
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None
