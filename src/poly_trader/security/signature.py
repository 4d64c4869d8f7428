# -*- coding: utf-8 -*-
"""HMAC-SHA256 signatures over raw webhook bodies.

The HUD sends ``X-HUD-Signature: sha256=<hex>`` where ``<hex>`` is the lowercase
hex HMAC-SHA256 of the exact request body bytes, keyed with the shared secret.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from poly_trader.exceptions import AuthError

SIGNATURE_PREFIX = "sha256="


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def compute_signature(secret: str | bytes, body: str | bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of body keyed with secret."""
    return hmac.new(_as_bytes(secret), _as_bytes(body), hashlib.sha256).hexdigest()


def timing_safe_equal(a: str, b: str) -> bool:
    """Compare two strings without short-circuiting on the first difference.

    Lengths are compared first; unequal lengths return False without looking at
    content. Equal-length inputs are walked to the end, OR-accumulating the XOR
    of every code point pair.
    """
    if len(a) != len(b):
        return False
    acc = 0
    for x, y in zip(a, b):
        acc |= ord(x) ^ ord(y)
    return acc == 0


def verify_hmac(secret: Optional[str], body: str | bytes, hex_signature: str) -> bool:
    """Return True if hex_signature is the HMAC of body under secret.

    Fails closed: an absent or empty secret never verifies.
    """
    if not secret:
        return False
    expected = compute_signature(secret, body)
    return timing_safe_equal(expected, hex_signature.lower())


def extract_signature(header: Optional[str]) -> str:
    """Return the hex digest from a ``sha256=<hex>`` header value.

    Raises:
        AuthError: If the header is missing or does not carry the sha256= scheme.
    """
    value = header or ""
    if not value.startswith(SIGNATURE_PREFIX):
        raise AuthError("Missing/invalid signature")
    return value[len(SIGNATURE_PREFIX):]
