from .auth_service import LocalAuthService

__all__ = ["LocalAuthService"]
