"""JWT token service.

Provides signed, time-limited session token creation and verification.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from roster_auth.exceptions import (
    InvalidSignatureError,
    InvalidTokenError,
    TokenExpiredError,
)
from roster_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT session token creation and verification.

    Tokens are stateless: rotating the secret key invalidates every
    token issued before the rotation.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_token(account_id, "teacher@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.account_id)
    """

    DEFAULT_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        token_expire_hours
            Hours until a token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=token_expire_hours)

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def create_token(
        self,
        account_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a session token for an account.

        Parameters
        ----------
        account_id
            The account's unique identifier
        email
            The account's email address
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": str(account_id),
            "email": email,
            "iat": now,
            "exp": expire,
            "jti": uuid4().hex,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claim

        Raises
        ------
        TokenExpiredError
            If the token's expiry has elapsed
        InvalidSignatureError
            If the token was signed with a different secret
        InvalidTokenError
            If the token is malformed in any other way
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )

            return TokenPayload(
                account_id=UUID(payload["sub"]),
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
