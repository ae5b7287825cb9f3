from typing import Generic, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, RootModel
from typing_extensions import Self

T = TypeVar("T")


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    model_config = ConfigDict(frozen=True)


class EntityId(RootValueObject[UUID]):
    """UUID-backed identifier shared by the aggregates."""

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse an identifier from its string form.

        Raises:
            ValueError: If `raw` is not a UUID.
        """
        return cls(UUID(raw))

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)
