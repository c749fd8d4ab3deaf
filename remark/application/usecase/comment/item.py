"""Comment response items shared by comment and vote use cases."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.model import CommentView, PageMeta


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    author_id: str
    content: str
    parent_id: str | None
    liked_by: list[str]
    disliked_by: list[str]
    like_count: int
    dislike_count: int
    has_liked: bool | None
    has_disliked: bool | None
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            comment_id=str(view.id),
            author_id=str(view.author_id),
            content=view.content,
            parent_id=str(view.parent_id) if view.parent_id else None,
            liked_by=sorted(str(u) for u in view.liked_by),
            disliked_by=sorted(str(u) for u in view.disliked_by),
            like_count=view.like_count,
            dislike_count=view.dislike_count,
            has_liked=view.has_liked,
            has_disliked=view.has_disliked,
            is_deleted=view.is_deleted,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )


class PageMetaItem(BaseModel):
    """Pagination metadata in responses."""

    page: int
    page_size: int
    total: int
    total_pages: int

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PageMetaItem":
        return cls(**meta.model_dump())


class CommentListResponse(BaseModel):
    """A page of comments."""

    comments: list[CommentItem]
    meta: PageMetaItem
