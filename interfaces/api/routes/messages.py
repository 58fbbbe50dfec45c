"""邮件 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from application.commands.mail.send_message import (
    SendMessageCommand,
    SendMessageHandler,
    SendMessageResult,
)
from application.handlers.mail.list_messages_handler import ListMessagesHandler
from application.queries.mail.list_messages import ListMessagesQuery
from domain.mail.entities.message import Message
from interfaces.api.dependencies import get_list_messages_handler, get_send_message_handler
from interfaces.api.errors import status_for_error
from interfaces.api.routes.users import ErrorResponse


router = APIRouter(tags=["Messages"])


class MessageResponse(BaseModel):
    """邮件响应"""

    model_config = ConfigDict(populate_by_name=True)

    subject: str = Field(..., alias="Subject", description="主题")
    body: str = Field(..., alias="Message", description="正文")
    sender_id: str = Field(..., alias="SenderId", description="发件人邮箱")
    receiver_id: str = Field(..., alias="ReceiverId", description="收件人邮箱")

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponse":
        return cls(
            subject=message.subject,
            body=message.body,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
        )


@router.post(
    "/Send",
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse, "description": "格式错误或用户不存在"}},
    summary="发送邮件",
    description="""
    请求体为纯文本邮件：

        Subject: Test message
        From: john@example.org
        To: bob@example.org

        Hello world!!

    发件人和收件人都必须已注册。
    """,
)
async def send_message(
    request: Request,
    handler: SendMessageHandler = Depends(get_send_message_handler),
) -> dict:
    raw_text = (await request.body()).decode("utf-8", errors="replace")
    result: SendMessageResult = await handler.handle(SendMessageCommand(raw_text=raw_text))

    if not result.success:
        raise HTTPException(
            status_code=status_for_error(result.error_code),
            detail=result.message,
        )

    return {}


@router.get(
    "/messages",
    response_model=List[MessageResponse],
    summary="查询邮件列表",
    description="返回所有邮件，按发送顺序排列。",
)
async def list_messages(
    handler: ListMessagesHandler = Depends(get_list_messages_handler),
) -> List[MessageResponse]:
    result = await handler.handle(ListMessagesQuery())
    return [MessageResponse.from_entity(message) for message in result.data]
