import base64
import hashlib
import hmac

import bcrypt

from accounts.app.errors import ErrorCode
from accounts.libs.result import Error, Result, Return

DEFAULT_ROUNDS = 12


class PasswordHasher:
    """
    Salted, peppered bcrypt hashing of user passwords.

    Business Rules:
    - The password is first keyed with the deployment-wide pepper
      (HMAC-SHA256, base64 encoded), so bcrypt always sees 44 bytes no
      matter how long the password is or which characters it uses
    - bcrypt generates a fresh salt per hash (stored inside the hash)
    - Cost factor defaults to 12 and is configurable per deployment
    """

    def __init__(self, pepper: str, rounds: int = DEFAULT_ROUNDS):
        self.pepper = pepper
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(self._peppered("dummy_password"), bcrypt.gensalt(rounds))

    def _peppered(self, password: str) -> bytes:
        digest = hmac.new(
            self.pepper.encode("utf-8"), password.encode("utf-8"), hashlib.sha256
        ).digest()
        # bcrypt stops at NUL bytes, base64 has none
        return base64.b64encode(digest)

    def hash(self, password: str) -> Result[str]:
        try:
            password_hash = bcrypt.hashpw(self._peppered(password), bcrypt.gensalt(self.rounds))
        except ValueError as exc:
            return Return.err(
                Error(ErrorCode.HASHING_FAILURE, f"Could not hash password: {exc}")
            )
        return Return.ok(password_hash.decode("utf-8"))

    def verify(self, password_hash: str, password: str) -> Result[None]:
        """
        Compare a plaintext password with a stored hash.

        Returns:
            Ok on match, CREDENTIAL_MISMATCH on a wrong password,
            HASHING_FAILURE if the stored hash is malformed
        """
        try:
            matches = bcrypt.checkpw(self._peppered(password), password_hash.encode("utf-8"))
        except ValueError as exc:
            return Return.err(
                Error(ErrorCode.HASHING_FAILURE, f"Could not verify password: {exc}")
            )

        if not matches:
            return Return.err(
                Error(ErrorCode.CREDENTIAL_MISMATCH, "Password does not match")
            )
        return Return.ok(None)

    def verify_dummy(self, password: str) -> bool:
        """Spend one bcrypt comparison so unknown accounts cost as much as known ones."""
        return bcrypt.checkpw(self._peppered(password), self._dummy_hash)
