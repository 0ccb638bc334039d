"""Authentication exceptions.

These exceptions are raised by the roster_auth package and should be
caught and translated by the identity layer (AccessPolicy).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token's expiry has elapsed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class InvalidSignatureError(InvalidTokenError):
    """Raised when a JWT token was not signed with the current secret."""

    def __init__(self, message: str = "Token signature is invalid"):
        super().__init__(message)
