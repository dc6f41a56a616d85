import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status

from app.ai.gateway import AIGatewayError
from app.api.deps import AIGatewayDep, CurrentUser
from app.models import ClaudePrompt

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/generate-claude")
async def generate_claude(
    payload: ClaudePrompt,
    current_user: CurrentUser,
    gateway: AIGatewayDep,
) -> dict[str, Any]:
    """
    Forward the prompt to Claude and return the reply envelope as is.
    The generated text is ``content[0].text``.
    """
    try:
        return await gateway.generate(payload.prompt)
    except AIGatewayError as e:
        logger.warning("Generation failed for user %s: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Generation failed"
        )
