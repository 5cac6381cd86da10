import base64
import hashlib
import hmac


class HMACHasher:
    """
    Keyed HMAC-SHA256 hashing of plaintext tokens.

    The output is deterministic for a given key, so a stored hash can be
    found again by hashing the token presented by a client.
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("HMAC secret key must not be empty")
        self._key = secret_key.encode("utf-8")

    def hash(self, plaintext: str) -> str:
        digest = hmac.new(self._key, plaintext.encode("utf-8"), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii")
