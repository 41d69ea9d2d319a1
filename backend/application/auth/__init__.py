from application.auth.session_guard import AuthAction, AuthDecision, require_auth

__all__ = ["AuthAction", "AuthDecision", "require_auth"]
