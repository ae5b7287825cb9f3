"""Blog domain services."""

from .blog import BlogService

__all__ = ["BlogService"]
