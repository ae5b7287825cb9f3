"""Summary statistics over a snapshot of blog records.

All functions are pure: they read the sequence they are given, never mutate
or retain it, and are total over any well-formed input including the empty
sequence. Records must already satisfy the Blog invariants (``likes`` is a
non-negative integer); nothing here re-validates them.

Tie-breaks follow encounter order. When several records or authors share the
maximum, the one reached first in a left-to-right scan wins.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from bloglist.domain.shared.model.value import ValueObject


class BlogRecord(Protocol):
    """Anything exposing the two fields the aggregations read."""

    @property
    def author(self) -> str: ...

    @property
    def likes(self) -> int: ...


B = TypeVar("B", bound=BlogRecord)


class AuthorBlogCount(ValueObject):
    author: str
    blogs: int


class AuthorLikes(ValueObject):
    author: str
    likes: int


def total_likes(records: Iterable[BlogRecord]) -> int:
    """Sum of likes across all records. 0 for an empty sequence."""
    return sum(record.likes for record in records)


def favourite_blog(records: Sequence[B]) -> B | None:
    """Return the first record with the highest like count, or None if empty."""
    favourite: B | None = None
    for record in records:
        if favourite is None or record.likes > favourite.likes:
            favourite = record
    return favourite


def most_blogs(records: Iterable[BlogRecord]) -> AuthorBlogCount:
    """Author with the most records. ``("", 0)`` for an empty sequence."""
    counts: dict[str, int] = {}
    for record in records:
        counts[record.author] = counts.get(record.author, 0) + 1

    author, blogs = _leader(counts)
    return AuthorBlogCount(author=author, blogs=blogs)


def most_likes(records: Iterable[BlogRecord]) -> AuthorLikes:
    """Author with the highest like total. ``("", 0)`` for an empty sequence."""
    totals: dict[str, int] = {}
    for record in records:
        totals[record.author] = totals.get(record.author, 0) + record.likes

    author, likes = _leader(totals)
    return AuthorLikes(author=author, likes=likes)


def _leader(tally: dict[str, int]) -> tuple[str, int]:
    # dicts keep first-insertion order; only a strict improvement moves the lead
    best_author, best = "", 0
    for author, value in tally.items():
        if value > best:
            best_author, best = author, value
    return best_author, best
