from domain.auth.user import AuthUser, SessionState, StoredUser

__all__ = ["AuthUser", "SessionState", "StoredUser"]
