from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.dependencies import get_chat_responder
from app.schemas.chat import ChatReply, ChatRequest
from app.services.chat import ChatResponder

router = APIRouter(prefix="/api")


@router.post("/ai-chat", response_model=ChatReply, response_model_exclude_none=True)
def ai_chat(
    request: ChatRequest,
    responder: ChatResponder = Depends(get_chat_responder),  # noqa: B008
) -> ChatReply | JSONResponse:
    """Answer a visitor question about the site owner, their services and projects."""
    reply = responder.resolve(request.message)
    if not reply.success:
        return JSONResponse(status_code=500, content=reply.model_dump(exclude_none=True))
    return reply
