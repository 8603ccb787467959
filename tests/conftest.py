"""Pytest configuration file for setting up shared test fixtures."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

import pytest
from pydantic import Field

from tinyorm import DatabaseModel, TinyModel, field, strict

# ============================================================================
# STANDARD MODELS USED ACROSS THE SUITE
# ============================================================================

AUTHOR_ID = "3ed44ac2-4dd8-4a2a-9aaa-879e4a44148f"

OneToFive = Annotated[int, Field(ge=1, le=5)]


@strict
class Article(TinyModel):
    """Strict model: every assignment is validated."""

    id = field(OneToFive)
    authorId = field(UUID)  # noqa: N815
    title = field()

    def double_id(self) -> int:
        """Plain method, must never show up in serialized output."""
        return self.id * 2


class Draft(TinyModel, strict=False):
    """Lenient model: values are only checked by an explicit validate()."""

    id = field(OneToFive)
    email = field(str)


class Comment(TinyModel, strict=True):
    """Nested model used inside Post."""

    body = field(str)
    userGuid = field(UUID)  # noqa: N815


class Post(TinyModel):
    """Model holding a nested model and a list of nested models."""

    id = field(int)
    topComment = field()  # noqa: N815
    comments = field()
    tags = field(list[str])


class ArticleRow(DatabaseModel, strict=True):
    """Database backed model."""

    id = field(OneToFive)
    authorId = field(UUID)  # noqa: N815
    isPublished = field(bool)  # noqa: N815


# --------------------------------------------------------------------------- #
# Fixtures                                                                    #
# --------------------------------------------------------------------------- #


@pytest.fixture(scope="session")
def author_id() -> str:
    """Stable GUID used as a foreign key in the models."""
    return AUTHOR_ID


@pytest.fixture
def article(author_id: str) -> Article:
    """A valid strict Article."""
    return Article({"id": 1, "authorId": author_id, "title": "Hello"})


@pytest.fixture
def post(author_id: str) -> Post:
    """A Post with one nested comment and a list of two comments."""
    top = Comment(body="first!", userGuid=author_id)
    replies = [
        Comment(body="reply one", userGuid=author_id),
        Comment(body="", userGuid=author_id),
    ]
    return Post(id=7, topComment=top, comments=replies, tags=["a", "b"])


@pytest.fixture
def article_cls() -> type[Article]:
    """The strict Article model type."""
    return Article


@pytest.fixture
def draft_cls() -> type[Draft]:
    """The lenient Draft model type."""
    return Draft


@pytest.fixture
def comment_cls() -> type[Comment]:
    """The strict Comment model type."""
    return Comment


@pytest.fixture
def row_cls() -> type[ArticleRow]:
    """The database backed ArticleRow model type."""
    return ArticleRow
