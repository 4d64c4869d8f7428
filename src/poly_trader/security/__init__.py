"""HUD webhook signature verification."""

from poly_trader.security.signature import (
    SIGNATURE_PREFIX,
    compute_signature,
    extract_signature,
    timing_safe_equal,
    verify_hmac,
)

__all__ = [
    "SIGNATURE_PREFIX",
    "compute_signature",
    "extract_signature",
    "timing_safe_equal",
    "verify_hmac",
]
