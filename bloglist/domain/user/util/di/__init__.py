from .provider import UserProvider

__all__ = ["UserProvider"]
