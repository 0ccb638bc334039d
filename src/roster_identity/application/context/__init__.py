from roster_identity.application.context.account_context import AccountContext

__all__ = ["AccountContext"]
