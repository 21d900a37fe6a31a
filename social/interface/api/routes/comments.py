"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel, Field

from social.application.usecase.comment import (
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from social.domain.service import AuthorizationService, CommentService
from social.domain.value import CommentId

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=1000)


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    comment_service: FromDishka[CommentService],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Edit a comment. Allowed to its author and to moderators and above."""
    actor = await authorization_service.authenticate(authorization)
    comment = await comment_service.get_comment_by_id(CommentId(comment_id))

    return await update_comment_use_case.execute(
        UpdateCommentRequest(actor=actor, comment=comment, content=request.content)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    comment_service: FromDishka[CommentService],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment. Allowed to its author and to admins."""
    actor = await authorization_service.authenticate(authorization)
    comment = await comment_service.get_comment_by_id(CommentId(comment_id))

    await delete_comment_use_case.execute(
        DeleteCommentRequest(actor=actor, comment=comment)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
