"""Value objects for the user domain."""

from bloglist.domain.shared.model.value import EntityId


class UserId(EntityId):
    """Unique identifier for a User."""
