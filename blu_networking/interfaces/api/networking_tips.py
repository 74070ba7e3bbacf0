"""AI networking tips route."""

from fastapi import APIRouter, Depends

from blu_networking.ai.tips import generate_networking_tips
from blu_networking.domain.models.user import User
from blu_networking.domain.schemas.networking_tips import (
    NetworkingProfile,
    NetworkingTipsRequest,
    NetworkingTipsResponse,
)
from blu_networking.interfaces.api.deps import get_current_user

router = APIRouter(prefix="/api", tags=["AI"])


@router.post("/networking-tips", response_model=NetworkingTipsResponse)
async def networking_tips(body: NetworkingTipsRequest, user: User = Depends(get_current_user)):
    """Profile fields from the request override the caller's stored profile."""
    profile = NetworkingProfile(
        full_name=user.full_name,
        industry=body.industry or user.industry,
        expertise=body.expertise or user.expertise,
        company=body.company or user.company,
        title=body.title or user.title,
        goal=body.goal,
        event_type=body.event_type,
    )
    return await generate_networking_tips(profile)
