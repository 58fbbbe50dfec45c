"""随机数据初始化 API 路由"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from application.commands.mail.init_random import InitRandomCommand, InitRandomHandler
from interfaces.api.dependencies import get_init_random_handler
from interfaces.api.routes.users import ErrorResponse


router = APIRouter(tags=["Seed"])


class InitRandomResponse(BaseModel):
    """随机数据初始化响应"""

    users_created: int = Field(..., description="注册的用户数")
    messages_created: int = Field(..., description="写入的邮件数")


def parse_seed(raw: str) -> Optional[int]:
    """
    解析请求体中的随机种子

    Args:
        raw: 请求体文本，空白表示不固定种子

    Returns:
        整数种子或 None

    Raises:
        ValueError: 不是整数
    """
    text = raw.strip()
    if not text:
        return None
    return int(text)


@router.post(
    "/InitRandom",
    response_model=InitRandomResponse,
    responses={400: {"model": ErrorResponse, "description": "种子不是整数"}},
    summary="生成随机数据",
    description="请求体为可选的整数种子；相同的种子总是生成相同的数据。",
)
async def init_random(
    request: Request,
    handler: InitRandomHandler = Depends(get_init_random_handler),
) -> InitRandomResponse:
    raw = (await request.body()).decode("utf-8", errors="replace")
    try:
        seed = parse_seed(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid seed: {raw.strip()}",
        )

    result = await handler.handle(InitRandomCommand(seed=seed))
    return InitRandomResponse(
        users_created=result.users_created,
        messages_created=result.messages_created,
    )
