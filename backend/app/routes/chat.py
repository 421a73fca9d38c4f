"""Chat route: the doctor questions the AI-roleplayed patient."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.auth import verify_api_key
from app.config import settings
from app.dependencies import get_user_repository
from app.repositories import UserRepository
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.patient_chat import PatientChatService
from app.services.roleplay_prompt import build_roleplay_prompt, extract_tags

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

# In-character answer shown when the model is unavailable
FALLBACK_ANSWER = "Maaf dok... (Sakit banget/Server Error)"


@router.post("/chat-ai", response_model=ChatResponse)
async def chat_ai(
    request: ChatRequest,
    users: UserRepository = Depends(get_user_repository),
    _api_key: str = Depends(verify_api_key),
) -> ChatResponse | JSONResponse:
    """Answer a doctor's question in character.

    This endpoint:
    1. Resolves the patient profile (request body, else the player's stored session)
    2. Logs the question to the player's chat history
    3. Builds the roleplay prompt and asks the model
    4. Logs the answer and returns it with its anamnesis tags

    Returns:
        ChatResponse, or a 500 carrying an in-character fallback answer when
        the model fails.
    """
    profile = request.patient_profile
    if not profile and request.roblox_id:
        profile = await users.get_patient_session(request.roblox_id)

    if request.roblox_id:
        await users.append_chat(request.roblox_id, "user", request.message, settings.chat_history_limit)

    system_prompt = build_roleplay_prompt(profile, request.disease_context)

    try:
        service = PatientChatService()
        try:
            answer = await service.generate_reply(system_prompt, request.message)
        finally:
            await service.close()
    except Exception:
        logger.exception("Patient reply generation failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"jawaban": FALLBACK_ANSWER},
        )

    if request.roblox_id:
        await users.append_chat(request.roblox_id, "model", answer, settings.chat_history_limit)

    return ChatResponse(answer=answer, tags=extract_tags(answer))
