from .provider import BlogProvider

__all__ = ["BlogProvider"]
