"""Value objects for the blog domain."""

from bloglist.domain.shared.model.value import EntityId


class BlogId(EntityId):
    """Unique identifier for a Blog."""
