"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import any_, asc, case, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Comment, CommentStatistics
from remark.domain.model.common import utcnow
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, CommentSortOrder, UserId, VoteAction
from remark.persistence.mappers import comment_to_dict, row_to_comment
from remark.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _parent_filter(parent_id: Optional[CommentId]) -> Any:
        if parent_id is None:
            return comments_table.c.parent_id.is_(None)
        return comments_table.c.parent_id == parent_id

    @staticmethod
    def _ordering(sort: CommentSortOrder) -> list[Any]:
        c = comments_table.c
        if sort == CommentSortOrder.OLDEST:
            return [asc(c.created_at), asc(c.id)]
        if sort == CommentSortOrder.MOST_LIKED:
            return [desc(func.cardinality(c.liked_by)), desc(c.created_at), desc(c.id)]
        if sort == CommentSortOrder.MOST_DISLIKED:
            return [
                desc(func.cardinality(c.disliked_by)),
                desc(c.created_at),
                desc(c.id),
            ]
        return [desc(c.created_at), desc(c.id)]

    async def _update_returning(
        self, comment_id: CommentId, values: dict
    ) -> Optional[Comment]:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(values)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(
        self,
        parent_id: Optional[CommentId] = None,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments sharing a parent, sorted and paginated."""
        stmt = (
            select(comments_table)
            .where(self._parent_filter(parent_id))
            .order_by(*self._ordering(sort))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(self, parent_id: Optional[CommentId] = None) -> int:
        """Count comments sharing a parent."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._parent_filter(parent_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and bump updated_at."""
        return await self._update_returning(
            comment_id, {"content": content, "updated_at": utcnow()}
        )

    async def set_vote_sets(
        self,
        comment_id: CommentId,
        liked_by: frozenset[UserId],
        disliked_by: frozenset[UserId],
    ) -> Optional[Comment]:
        """Atomically replace both vote sets in one UPDATE."""
        return await self._update_returning(
            comment_id,
            {
                "liked_by": list(liked_by),
                "disliked_by": list(disliked_by),
                "updated_at": utcnow(),
            },
        )

    async def toggle_vote(
        self, comment_id: CommentId, user_id: UserId, action: VoteAction
    ) -> Optional[Comment]:
        """Toggle a vote with a single conditional array update.

        Both SET expressions see the row as it was before the update, and the
        row lock taken by UPDATE serializes concurrent toggles on the same
        comment, so no toggle is lost and no user ends up in both arrays.
        """
        user = literal(user_id, UUID)
        if action == VoteAction.LIKE:
            same_key, opposite_key = "liked_by", "disliked_by"
        else:
            same_key, opposite_key = "disliked_by", "liked_by"
        same = comments_table.c[same_key]
        opposite = comments_table.c[opposite_key]

        toggled = case(
            (user == any_(same), func.array_remove(same, user)),
            else_=func.array_append(same, user),
        )

        return await self._update_returning(
            comment_id,
            {
                same_key: toggled,
                opposite_key: func.array_remove(opposite, user),
                "updated_at": utcnow(),
            },
        )

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment as deleted."""
        return await self._update_returning(
            comment_id, {"is_deleted": True, "updated_at": utcnow()}
        )

    async def statistics(self) -> CommentStatistics:
        """Aggregate counters over all comments in one query."""
        c = comments_table.c
        stmt = select(
            func.count().label("total"),
            func.count().filter(c.parent_id.is_(None)).label("top_level"),
            func.count().filter(c.parent_id.is_not(None)).label("replies"),
            func.count().filter(c.is_deleted.is_(True)).label("deleted"),
            func.coalesce(func.sum(func.cardinality(c.liked_by)), 0).label(
                "total_likes"
            ),
            func.coalesce(func.sum(func.cardinality(c.disliked_by)), 0).label(
                "total_dislikes"
            ),
        ).select_from(comments_table)

        result = await self.session.execute(stmt)
        row = result.one()._asdict()
        return CommentStatistics(**{key: int(value) for key, value in row.items()})
