"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from remark.domain.error import NotFoundError, ValidationError
from remark.domain.repository import CommentRepository
from remark.domain.service import CommentService
from remark.domain.value import CommentId
from tests.factories import make_comment, new_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """New comment starts with empty vote sets and no parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = new_user()

        # Act
        result = await comment_service.create_comment(
            content="First!", author_id=author_id
        )

        # Assert
        assert result.parent_id is None
        assert result.author_id == author_id
        assert result.liked_by == frozenset()
        assert result.disliked_by == frozenset()
        assert result.is_deleted is False
        assert result.created_at == result.updated_at

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_content_is_trimmed(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        result = await comment_service.create_comment(
            content="   padded   ", author_id=new_user()
        )

        assert result.content == "padded"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t", "x" * 2001])
    async def test_invalid_content_rejected(self, unit_env, content):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(content=content, author_id=new_user())

        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_content_at_max_length_accepted(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        result = await comment_service.create_comment(
            content="x" * 2000, author_id=new_user()
        )

        assert len(result.content) == 2000

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment())

        reply = await comment_service.create_comment(
            content="A reply", author_id=new_user(), parent_id=parent.id
        )

        assert reply.parent_id == parent.id
        assert reply.is_reply

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises(self, unit_env):
        """Creating comment with non-existent parent should raise error."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await comment_service.create_comment(
                content="Orphan",
                author_id=new_user(),
                parent_id=CommentId(uuid4()),
            )

        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_reply_to_deleted_parent_allowed(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(is_deleted=True))

        reply = await comment_service.create_comment(
            content="Still replying", author_id=new_user(), parent_id=parent.id
        )

        assert reply.parent_id == parent.id


class TestFindChildren:
    @pytest.mark.asyncio
    async def test_pages_newest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment())
        replies = [
            await comment_repo.save(make_comment(parent_id=parent.id, minutes=i))
            for i in range(1, 8)
        ]

        first, total = await comment_service.find_children(parent.id, 1, 5)
        second, _ = await comment_service.find_children(parent.id, 2, 5)

        assert total == 7
        assert [c.id for c in first] == [c.id for c in reversed(replies[2:])]
        assert [c.id for c in second] == [replies[1].id, replies[0].id]

    @pytest.mark.asyncio
    async def test_grandchildren_not_included(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        root = await comment_repo.save(make_comment())
        child = await comment_repo.save(make_comment(parent_id=root.id, minutes=1))
        await comment_repo.save(make_comment(parent_id=child.id, minutes=2))

        children, total = await comment_service.find_children(root.id, 1, 10)

        assert total == 1
        assert [c.id for c in children] == [child.id]


class TestUpdateContent:
    @pytest.mark.asyncio
    async def test_update_bumps_updated_at(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        original = await comment_repo.save(make_comment(content="before"))

        updated = await comment_service.update_content(original.id, " after ")

        assert updated.content == "after"
        assert updated.updated_at > original.updated_at
        assert updated.created_at == original.created_at

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_content(CommentId(uuid4()), "text")


class TestSetVoteSets:
    @pytest.mark.asyncio
    async def test_replaces_both_sets(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        a, b = new_user(), new_user()
        comment = await comment_repo.save(make_comment(liked_by={a}))

        updated = await comment_service.set_vote_sets(
            comment.id, frozenset({b}), frozenset({a})
        )

        assert updated.liked_by == {b}
        assert updated.disliked_by == {a}

    @pytest.mark.asyncio
    async def test_overlapping_sets_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user = new_user()
        comment = await comment_repo.save(make_comment())

        with pytest.raises(ValidationError):
            await comment_service.set_vote_sets(
                comment.id, frozenset({user}), frozenset({user})
            )

        unchanged = await comment_repo.find_by_id(comment.id)
        assert unchanged.liked_by == frozenset()


class TestSoftDelete:
    @pytest.mark.asyncio
    async def test_soft_delete_keeps_record(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(content="keep me"))

        await comment_service.soft_delete(comment.id)

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.is_deleted is True
        assert stored.content == "keep me"

    @pytest.mark.asyncio
    async def test_soft_delete_missing_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.soft_delete(CommentId(uuid4()))
