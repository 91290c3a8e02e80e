"""
bindle_core.utils
-----------------
Lightweight helpers for base64 handling, timestamps and content digests.
Keys and signatures cross every boundary as standard, padded base64.
"""

from __future__ import annotations
import base64, binascii, hashlib, time
from .errors import DecodingError

def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def b64d(s: str, what: str = "payload") -> bytes:
    # strict: non-alphabet characters and bad padding are errors, not ignored
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, AttributeError) as e:
        raise DecodingError(f"malformed base64 {what}: {e}") from e

def now_unix() -> int:
    return int(time.time())

def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
