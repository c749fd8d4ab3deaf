"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from remark.domain.error import NotFoundError, ValidationError
from tests.factories import new_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_response(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author_id = str(new_user())

        result = await use_case.execute(
            CreateCommentRequest(content=" Hello ", author_id=author_id)
        )

        assert result.content == "Hello"
        assert result.author_id == author_id
        assert result.parent_id is None
        assert result.liked_by == []
        assert result.like_count == 0
        assert result.dislike_count == 0
        assert result.has_liked is False
        assert result.has_disliked is False

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(content="Parent", author_id=str(new_user()))
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                content="Child",
                author_id=str(new_user()),
                parent_id=parent.comment_id,
            )
        )

        assert reply.parent_id == parent.comment_id

    @pytest.mark.asyncio
    async def test_missing_parent(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    content="Child",
                    author_id=str(new_user()),
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_blank_content(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(content="  ", author_id=str(new_user()))
            )
