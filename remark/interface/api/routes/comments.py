"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    CommentItem,
    CommentListResponse,
    CommentStatisticsResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentStatisticsUseCase,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from remark.application.usecase.vote import ToggleVoteRequest, ToggleVoteUseCase
from remark.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from remark.domain.service import JWTService
from remark.domain.value import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    CommentSortOrder,
    VoteAction,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def _authenticate(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> str:
    """Resolve the requesting user's ID from the cookie or bearer header.

    Raises:
        HTTPException: 401 if no valid token identifies a user
    """
    token = auth_token
    if not token and authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            token = credentials.strip()

    user_id = jwt_service.get_user_id_from_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    return str(user_id)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    parent_id: UUID | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Create a top-level comment or reply to another comment.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header (alternative to the cookie)

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, parent missing, or validation fails
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        use_case_request = CreateCommentRequest(
            content=request.content,
            author_id=user_id,
            parent_id=str(request.parent_id) if request.parent_id else None,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.get("", response_model=CommentListResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    sort: CommentSortOrder = CommentSortOrder.NEWEST,
    parent_id: UUID | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentListResponse:
    """List comments with sorting and pagination.

    Without parent_id only top-level comments are listed.

    Args:
        list_comments_use_case: List comments use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        page_size: Comments per page (configured default when omitted)
        sort: newest, oldest, mostLiked or mostDisliked
        parent_id: List the children of this comment instead
        auth_token: JWT token from cookie
        authorization: Bearer token header (alternative to the cookie)

    Returns:
        Page of comments with pagination metadata
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                page=page,
                page_size=page_size,
                sort=sort,
                parent_id=str(parent_id) if parent_id else None,
                user_id=user_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.get("/statistics", response_model=CommentStatisticsResponse)
async def get_statistics(
    statistics_use_case: FromDishka[GetCommentStatisticsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentStatisticsResponse:
    """Aggregate comment and vote counts."""
    _authenticate(jwt_service, auth_token, authorization)
    return await statistics_use_case.execute()


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Get a single comment with its vote summary.

    Raises:
        HTTPException: If not authenticated or comment not found
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Update a comment's content.

    Only the comment author can edit, and deleted comments cannot be edited.

    Args:
        comment_id: Comment UUID
        request: Update data (content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header (alternative to the cookie)

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authenticated, not authorized, deleted, or invalid
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                user_id=user_id,
                content=request.content,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to update this comment",
        )
    except ContentDeletedError as e:
        logfire.warn("Attempt to edit deleted comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Comment has been deleted",
        )
    except ValidationError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Only the author can delete.

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )


async def _toggle_vote(
    comment_id: UUID,
    action: VoteAction,
    toggle_vote_use_case: ToggleVoteUseCase,
    user_id: str,
) -> CommentItem:
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(comment_id=str(comment_id), user_id=user_id, action=action)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/{comment_id}/like", response_model=CommentItem)
async def like_comment(
    comment_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Toggle a like: like, un-like, or switch a dislike to a like."""
    user_id = _authenticate(jwt_service, auth_token, authorization)
    return await _toggle_vote(comment_id, VoteAction.LIKE, toggle_vote_use_case, user_id)


@router.post("/{comment_id}/dislike", response_model=CommentItem)
async def dislike_comment(
    comment_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Toggle a dislike: dislike, un-dislike, or switch a like to a dislike."""
    user_id = _authenticate(jwt_service, auth_token, authorization)
    return await _toggle_vote(
        comment_id, VoteAction.DISLIKE, toggle_vote_use_case, user_id
    )


@router.get("/{comment_id}/replies", response_model=CommentListResponse)
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentListResponse:
    """List direct replies to a comment, newest first.

    Args:
        comment_id: Parent comment UUID
        get_replies_use_case: Get replies use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        page_size: Replies per page (configured default when omitted)
        auth_token: JWT token from cookie
        authorization: Bearer token header (alternative to the cookie)

    Returns:
        Page of replies with pagination metadata
    """
    user_id = _authenticate(jwt_service, auth_token, authorization)

    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(
                comment_id=str(comment_id),
                page=page,
                page_size=page_size,
                user_id=user_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
