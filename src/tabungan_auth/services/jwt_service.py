"""Session tokens handed out after a successful login.

Tokens are HS256-signed JWTs with the user id in ``sub``, the email, and
``iat``/``exp`` timestamps. There are no refresh tokens: a client logs in
again once ``exp`` has passed.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from tabungan_auth.exceptions import InvalidTokenError
from tabungan_auth.schemas import TokenPayload


class JWTService:
    """Issue and verify session tokens.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> token = service.create_access_token(user.id, user.email)
    >>> service.verify_token(token).user_id == user.id
    True
    """

    ALGORITHM = "HS256"
    DEFAULT_ACCESS_EXPIRE_HOURS = 24

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetime

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Sign a token for ``user_id``.

        Parameters
        ----------
        user_id
            Becomes the ``sub`` claim
        email
            Copied into the token for display; never used for lookups
        expires_delta
            Overrides the configured lifetime
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """
        Check signature and expiry, then unpack the claims.

        Raises
        ------
        InvalidTokenError
            If the token is expired, tampered with, signed with another key
            or missing a claim
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            msg = "Token has expired"
            raise InvalidTokenError(msg) from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e

        try:
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                email=claims["email"],
                exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e
