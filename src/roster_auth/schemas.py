"""Auth schemas and data structures.

These are simple data classes used for transferring token
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the claim extracted from a verified JWT token.

    Attributes
    ----------
    account_id
        The unique identifier of the account (``sub`` claim)
    email
        The account's email address at issuance
    issued_at
        Token issuance timestamp
    exp
        Token expiration timestamp
    """

    account_id: UUID
    email: str
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
