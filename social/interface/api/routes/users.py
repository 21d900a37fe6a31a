"""User routes: activation, profiles, follows and the feed."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request, Response, status

from social.application.usecase.user import (
    ActivateUserRequest,
    ActivateUserUseCase,
    FeedItemResponse,
    FollowUserRequest,
    FollowUserUseCase,
    GetUserFeedRequest,
    GetUserFeedUseCase,
    GetUserRequest,
    GetUserUseCase,
    UnfollowUserUseCase,
    UserResponse,
)
from social.domain.service import AuthorizationService
from social.interface.api.pagination import parse_feed_query

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.put("/activate/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def activate_user(
    token: str,
    activate_user_use_case: FromDishka[ActivateUserUseCase],
) -> Response:
    """Redeem an invitation token and activate its user."""
    await activate_user_use_case.execute(ActivateUserRequest(token=token))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Declared before /{user_id} so "feed" is not parsed as an id
@router.get("/feed", response_model=list[FeedItemResponse])
async def get_user_feed(
    request: Request,
    get_user_feed_use_case: FromDishka[GetUserFeedUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> list[FeedItemResponse]:
    """Posts by the caller and the users they follow.

    Query parameters: ``limit``, ``offset``, ``sort`` (asc|desc),
    ``search``, ``tags`` (comma separated), ``since`` and ``until``
    (RFC 3339).
    """
    viewer = await authorization_service.authenticate(authorization)
    query = parse_feed_query(request.query_params)

    return await get_user_feed_use_case.execute(
        GetUserFeedRequest(viewer=viewer, query=query)
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    get_user_use_case: FromDishka[GetUserUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Get a user's profile."""
    await authorization_service.authenticate(authorization)
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.put("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
async def follow_user(
    user_id: int,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Follow a user."""
    follower = await authorization_service.authenticate(authorization)
    await follow_user_use_case.execute(
        FollowUserRequest(follower=follower, followed_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/unfollow", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    user_id: int,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    authorization_service: FromDishka[AuthorizationService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Stop following a user."""
    follower = await authorization_service.authenticate(authorization)
    await unfollow_user_use_case.execute(
        FollowUserRequest(follower=follower, followed_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
