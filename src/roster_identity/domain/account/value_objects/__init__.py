from roster_identity.domain.account.value_objects.email import Email
from roster_identity.domain.account.value_objects.role import DEFAULT_ROLES, Role

__all__ = ["DEFAULT_ROLES", "Email", "Role"]
