"""User registration REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from bloglist.domain.user.command.register import RegisterUser, RegisterUserHandler
from bloglist.domain.user.query.list_users import ListUsers, ListUsersHandler, UserDetail

router = APIRouter(prefix="/users", tags=["Users"], route_class=DishkaRoute)


@router.get("", response_model=list[UserDetail])
async def list_users(
    handler: FromDishka[ListUsersHandler],
) -> list[UserDetail]:
    result = await handler.run(ListUsers())
    return result.items


@router.post("", response_model=UserDetail, status_code=201)
async def register_user(
    body: RegisterUser,
    handler: FromDishka[RegisterUserHandler],
) -> UserDetail:
    return await handler.run(body)
