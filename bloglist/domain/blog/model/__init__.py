"""Blog domain models."""

from .aggregate import Blog
from .value import BlogId

__all__ = ["Blog", "BlogId"]
