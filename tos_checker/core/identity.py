"""
Document identity canonicalization.

A document identity is the page URL the extension reports. Clients send
it percent-encoded. It is decoded exactly once where it enters the
service and passed around in canonical form afterwards:

- JSON body fields go through ``canonicalize_identity`` (one unquote).
- Path parameters are already decoded by the ASGI server, so routes only
  call ``normalize_identity``.

Dependencies: urllib (stdlib)
System role: Single point of identity decoding
"""

from urllib.parse import unquote

from tos_checker.core.exceptions import InvalidIdentityError

MAX_IDENTITY_LENGTH = 2048


def normalize_identity(value: str | None) -> str:
    """
    Validate an already-decoded identity and strip surrounding whitespace.

    Args:
        value: Decoded identity

    Returns:
        str: Canonical identity

    Raises:
        InvalidIdentityError: If the identity is missing, blank, too long
            or contains control characters
    """
    if value is None:
        raise InvalidIdentityError("Document identity is required")

    identity = value.strip()
    if not identity:
        raise InvalidIdentityError("Document identity must not be blank")
    if len(identity) > MAX_IDENTITY_LENGTH:
        raise InvalidIdentityError(
            "Document identity is too long",
            details={"length": len(identity), "max_length": MAX_IDENTITY_LENGTH},
        )
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in identity):
        raise InvalidIdentityError("Document identity contains control characters")
    return identity


def canonicalize_identity(value: str | None) -> str:
    """
    Decode a percent-encoded identity once and normalize it.

    Args:
        value: Identity as received on the wire

    Returns:
        str: Canonical identity
    """
    if value is None:
        raise InvalidIdentityError("Document identity is required")
    return normalize_identity(unquote(value))
