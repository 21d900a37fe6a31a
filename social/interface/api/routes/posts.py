"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel, Field

from social.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from social.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from social.domain.service import AuthorizationService, PostService
from social.domain.value import PostId

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    tags: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields keep their value. ``version`` is the version the client
    last read; when omitted, the version loaded for this request is used.
    """

    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1, max_length=1000)
    tags: list[str] | None = None
    version: int | None = Field(default=None, ge=1)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    content: str = Field(min_length=1, max_length=1000)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Publish a post as the authenticated user."""
    author = await authorization_service.authenticate(authorization)

    return await create_post_use_case.execute(
        CreatePostRequest(
            author=author,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> GetPostResponse:
    """Get a post with its comments."""
    await authorization_service.authenticate(authorization)
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    post_service: FromDishka[PostService],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Edit a post. Allowed to its author and to moderators and above.

    A stale ``version`` is answered with 404, like a missing post.
    """
    actor = await authorization_service.authenticate(authorization)
    post = await post_service.get_post_by_id(PostId(post_id))

    return await update_post_use_case.execute(
        UpdatePostRequest(
            actor=actor,
            post=post,
            title=request.title,
            content=request.content,
            tags=request.tags,
            version=request.version,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    post_service: FromDishka[PostService],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a post. Allowed to its author and to admins."""
    actor = await authorization_service.authenticate(authorization)
    post = await post_service.get_post_by_id(PostId(post_id))

    await delete_post_use_case.execute(DeletePostRequest(actor=actor, post=post))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> list[CommentResponse]:
    """List the comments on a post, newest first."""
    await authorization_service.authenticate(authorization)
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Comment on a post."""
    author = await authorization_service.authenticate(authorization)

    return await create_comment_use_case.execute(
        CreateCommentRequest(author=author, post_id=post_id, content=request.content)
    )
