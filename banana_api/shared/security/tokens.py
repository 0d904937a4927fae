"""
Session token generation.

Tokens are drawn from the OS CSPRNG and mapped byte-by-byte onto a
62-character alphabet. The modulo mapping is slightly biased, which is
acceptable for session identifiers but not for key material.
"""

import secrets
import string

TOKEN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
TOKEN_LENGTH = 32


def generate_secure_token(length: int = TOKEN_LENGTH) -> str:
    """Return a random alphanumeric token of `length` characters."""
    return "".join(
        TOKEN_ALPHABET[byte % len(TOKEN_ALPHABET)]
        for byte in secrets.token_bytes(length)
    )
