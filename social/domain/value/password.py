"""Password value object backed by bcrypt."""

import bcrypt

from social.domain.error import HashingError

# bcrypt work factor
BCRYPT_COST = 10

# bcrypt ignores (or, in recent releases, rejects) anything past 72 bytes
MAX_PASSWORD_BYTES = 72


class Password:
    """Salted password hash.

    Only the bcrypt hash is kept; the plaintext passed to ``set()`` is
    discarded once hashed.
    """

    def __init__(self, hash: bytes | None = None) -> None:
        self._hash = hash

    @property
    def hash(self) -> bytes | None:
        return self._hash

    def set(self, plaintext: str) -> None:
        """Hash and store a new password.

        Args:
            plaintext: Password as submitted by the user

        Raises:
            HashingError: If the password is too long or bcrypt fails
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise HashingError(f"password exceeds {MAX_PASSWORD_BYTES} bytes")

        try:
            hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=BCRYPT_COST))
        except (ValueError, TypeError) as e:
            raise HashingError(str(e)) from e

        self._hash = hashed

    def verify(self, candidate: str) -> bool:
        """Check a candidate password against the stored hash.

        A missing or malformed stored hash never matches.
        """
        if not self._hash:
            return False

        try:
            return bcrypt.checkpw(candidate.encode("utf-8"), self._hash)
        except (ValueError, TypeError):
            return False

    def __repr__(self) -> str:
        return "Password(hash=***)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Password):
            return NotImplemented
        return self._hash == other._hash
