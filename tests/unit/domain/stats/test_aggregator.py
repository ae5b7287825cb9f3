"""Unit tests for the blog aggregation functions."""

import itertools

import pytest

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.stats.aggregator import (
    AuthorBlogCount,
    AuthorLikes,
    favourite_blog,
    most_blogs,
    most_likes,
    total_likes,
)


def _blog(author: str = "Teemu", likes: int = 0, title: str = "Blogi") -> Blog:
    return Blog.create(title=title, url=f"https://example.com/{title}", author=author, likes=likes)


@pytest.fixture
def blogs() -> list[Blog]:
    return [
        _blog("Michael Chan", 7, "React patterns"),
        _blog("Edsger W. Dijkstra", 5, "Go To Statement Considered Harmful"),
        _blog("Edsger W. Dijkstra", 12, "Canonical string reduction"),
        _blog("Robert C. Martin", 10, "First class tests"),
        _blog("Robert C. Martin", 0, "TDD harms architecture"),
        _blog("Robert C. Martin", 2, "Type wars"),
    ]


class TestTotalLikes:
    def test_empty_list_is_zero(self):
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self):
        assert total_likes([_blog(likes=5)]) == 5

    def test_zero_and_one(self):
        assert total_likes([_blog(likes=0), _blog(likes=1)]) == 1

    def test_bigger_list(self, blogs: list[Blog]):
        assert total_likes(blogs) == 36

    def test_independent_of_order(self, blogs: list[Blog]):
        expected = total_likes(blogs)
        for perm in itertools.islice(itertools.permutations(blogs), 50):
            assert total_likes(list(perm)) == expected

    def test_accepts_any_iterable(self, blogs: list[Blog]):
        assert total_likes(b for b in blogs) == 36


class TestFavouriteBlog:
    def test_empty_list_returns_none(self):
        assert favourite_blog([]) is None

    def test_single_blog_is_favourite(self):
        only = _blog(likes=3)
        assert favourite_blog([only]) is only

    def test_picks_most_liked(self, blogs: list[Blog]):
        assert favourite_blog(blogs) is blogs[2]

    def test_tie_goes_to_first_occurrence(self):
        first_max = _blog("B", 9)
        records = [_blog("A", 5), first_max, _blog("A", 9)]

        result = favourite_blog(records)

        assert result is first_max
        assert result.author == "B"
        assert result.likes == 9

    def test_all_zero_likes_returns_first(self):
        records = [_blog("A", 0), _blog("B", 0)]
        assert favourite_blog(records) is records[0]


class TestMostBlogs:
    def test_empty_list(self):
        assert most_blogs([]) == AuthorBlogCount(author="", blogs=0)

    def test_single_blog(self):
        assert most_blogs([_blog("A")]) == AuthorBlogCount(author="A", blogs=1)

    def test_counts_per_author(self):
        records = [_blog(a) for a in ["A", "A", "B", "A", "B"]]
        assert most_blogs(records) == AuthorBlogCount(author="A", blogs=3)

    def test_bigger_list(self, blogs: list[Blog]):
        assert most_blogs(blogs) == AuthorBlogCount(author="Robert C. Martin", blogs=3)

    def test_tie_goes_to_author_seen_first(self):
        records = [_blog(a) for a in ["B", "B", "A", "A"]]
        assert most_blogs(records) == AuthorBlogCount(author="B", blogs=2)

    def test_tie_interleaved_uses_first_appearance(self):
        records = [_blog(a) for a in ["B", "A", "A", "B"]]
        assert most_blogs(records).author == "B"


class TestMostLikes:
    def test_empty_list(self):
        assert most_likes([]) == AuthorLikes(author="", likes=0)

    def test_sums_likes_per_author(self):
        records = [_blog("A", 3), _blog("B", 10), _blog("A", 8)]
        assert most_likes(records) == AuthorLikes(author="A", likes=11)

    def test_bigger_list(self, blogs: list[Blog]):
        assert most_likes(blogs) == AuthorLikes(author="Edsger W. Dijkstra", likes=17)

    def test_tie_goes_to_author_seen_first(self):
        records = [_blog("B", 4), _blog("A", 1), _blog("A", 3)]
        assert most_likes(records) == AuthorLikes(author="B", likes=4)

    def test_only_zero_likes_keeps_empty_result(self):
        records = [_blog("A", 0), _blog("B", 0)]
        assert most_likes(records) == AuthorLikes(author="", likes=0)


class TestPurity:
    def test_repeated_calls_give_identical_results(self, blogs: list[Blog]):
        snapshot = [b.model_copy() for b in blogs]

        for fn in (total_likes, favourite_blog, most_blogs, most_likes):
            assert fn(blogs) == fn(blogs)

        assert blogs == snapshot

    def test_works_with_plain_records(self):
        class Row:
            def __init__(self, author: str, likes: int) -> None:
                self.author = author
                self.likes = likes

        rows = [Row("A", 1), Row("B", 2)]

        assert total_likes(rows) == 3
        assert favourite_blog(rows) is rows[1]
        assert most_likes(rows) == AuthorLikes(author="B", likes=2)
