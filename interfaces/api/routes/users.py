"""用户 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from application.commands.mail.register_user import (
    RegisterUserCommand,
    RegisterUserHandler,
    RegisterUserResult,
)
from application.handlers.mail.get_user_handler import GetUserHandler
from application.handlers.mail.list_users_handler import ListUsersHandler
from application.queries.mail.get_user import GetUserQuery
from application.queries.mail.list_users import ListUsersQuery
from domain.mail.entities.user import User
from interfaces.api.dependencies import (
    get_get_user_handler,
    get_list_users_handler,
    get_register_user_handler,
)
from interfaces.api.errors import status_for_error


router = APIRouter(tags=["Users"])


# ============ Request/Response DTOs ============


class RegisterUserRequest(BaseModel):
    """
    注册用户请求

    Attributes:
        user_name: 用户名（JSON 字段 UserName）
        email: 邮箱地址（JSON 字段 Email）
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [{"UserName": "Ivan Pupkin", "Email": "pupkin@staff.hse.ru"}]
        },
    )

    user_name: str = Field(..., alias="UserName", description="用户名")
    email: str = Field(..., alias="Email", description="邮箱地址", min_length=1)


class UserResponse(BaseModel):
    """用户信息响应"""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="UserName", description="用户名")
    email: str = Field(..., alias="Email", description="邮箱地址")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(user_name=user.user_name, email=user.email)


class ErrorResponse(BaseModel):
    """错误响应"""

    error: str = Field(..., description="错误详情")


# ============ API Endpoints ============


@router.post(
    "/RegisterUser",
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse, "description": "邮箱已被注册"}},
    summary="注册用户",
)
async def register_user(
    request: RegisterUserRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> dict:
    """注册用户，邮箱必须唯一"""
    command = RegisterUserCommand(user_name=request.user_name, email=request.email)
    result: RegisterUserResult = await handler.handle(command)

    if not result.success:
        raise HTTPException(
            status_code=status_for_error(result.error_code),
            detail=result.message,
        )

    return {}


@router.get(
    "/user/{email}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse, "description": "用户不存在"}},
    summary="查询用户信息",
)
async def get_user(
    email: str,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserResponse:
    """按邮箱查询用户"""
    result = await handler.handle(GetUserQuery(email=email))

    if not result.found:
        raise HTTPException(
            status_code=status_for_error(result.error_code),
            detail=result.message,
        )

    return UserResponse.from_entity(result.user)


@router.get(
    "/users",
    response_model=List[UserResponse],
    summary="查询用户列表",
    description="返回所有用户，按邮箱升序排列。",
)
async def list_users(
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> List[UserResponse]:
    result = await handler.handle(ListUsersQuery())
    return [UserResponse.from_entity(user) for user in result.data]
