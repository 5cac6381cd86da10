import secrets

# 32 bytes of entropy, 43 characters once URL-safe encoded
TOKEN_BYTES = 32


def generate_token(nbytes: int = TOKEN_BYTES) -> str:
    """
    Generate an opaque, URL-safe token for remember-me sessions and password resets.

    Raises:
        OSError: the operating system entropy source is unavailable
    """
    return secrets.token_urlsafe(nbytes)
