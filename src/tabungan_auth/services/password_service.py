"""bcrypt password hashing shared by user logins and bank-account credentials."""

import secrets

import bcrypt

from tabungan_auth.exceptions import WeakPasswordError

# bcrypt only looks at the first 72 bytes; newer releases raise instead of
# truncating, so truncate explicitly for hash and verify alike.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHashingService:
    """Hash and verify passwords with a fixed bcrypt work factor.

    Every ``verify`` call costs one bcrypt computation at ``rounds``,
    including calls against ``placeholder_hash``. ``bcrypt.checkpw``
    compares digests in constant time.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("correct horse")
    >>> service.verify("correct horse", stored)
    True
    >>> service.verify("battery staple", service.placeholder_hash)
    False
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost (log2 of the iteration count), 4 to 31
        """
        self._rounds = rounds
        self._placeholder_hash: str | None = None

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def placeholder_hash(self) -> str:
        """Hash of a random secret nobody knows, built on first use.

        Checked in place of a stored hash when the identity is unknown, so
        a miss costs exactly as much as a wrong password.
        """
        if self._placeholder_hash is None:
            unguessable = secrets.token_urlsafe(32)
            self._placeholder_hash = self._hash(unguessable)
        return self._placeholder_hash

    def hash(self, password: str) -> str:
        """
        Validate, then hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If the password is empty, shorter than 8 or longer than 128
            characters
        """
        self.validate_strength(password)
        return self._hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """True when ``password`` matches; False for a mismatch or a corrupt hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")
