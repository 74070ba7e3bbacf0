"""Networking tips generator - LCEL chain with validated JSON output."""

from typing import Dict

import structlog
from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import ValidationError

from blu_networking.ai.llm import get_llm
from blu_networking.ai.prompts import NOT_SPECIFIED, SYSTEM_PROMPT, TIPS_PROMPT_TEMPLATE
from blu_networking.core.exceptions import ExternalServiceError
from blu_networking.domain.schemas.networking_tips import NetworkingProfile, NetworkingTipsResponse

logger = structlog.get_logger(__name__)

ERROR_PREFIX = "Failed to generate networking tips"


def build_prompt_variables(profile: NetworkingProfile) -> Dict[str, str]:
    return {
        "full_name": profile.full_name,
        "industry": profile.industry or NOT_SPECIFIED,
        "expertise": profile.expertise or NOT_SPECIFIED,
        "company": profile.company or NOT_SPECIFIED,
        "title": profile.title or NOT_SPECIFIED,
        "goal_line": f"- Current networking goal: {profile.goal}" if profile.goal else "",
        "event_type_line": f"- Upcoming event type: {profile.event_type}" if profile.event_type else "",
    }


def build_chain():
    prompt = ChatPromptTemplate.from_messages([
        ("system", SYSTEM_PROMPT),
        ("human", TIPS_PROMPT_TEMPLATE),
    ])
    return prompt | get_llm() | JsonOutputParser()


async def generate_networking_tips(profile: NetworkingProfile) -> NetworkingTipsResponse:
    """Ask the model for tips and validate the reply against NetworkingTipsResponse.

    Any provider, parsing or validation failure surfaces as ExternalServiceError.
    """
    chain = build_chain()
    try:
        raw = await chain.ainvoke(build_prompt_variables(profile))
    except ExternalServiceError:
        raise
    except Exception as exc:
        logger.exception("Networking tips request failed", error_type=type(exc).__name__)
        raise ExternalServiceError(f"{ERROR_PREFIX}: {exc}") from exc

    if not raw:
        raise ExternalServiceError(f"{ERROR_PREFIX}: empty response from model")

    try:
        return NetworkingTipsResponse.model_validate(raw)
    except ValidationError as exc:
        logger.error("Model returned malformed networking tips", errors=exc.error_count())
        raise ExternalServiceError(f"{ERROR_PREFIX}: response did not match the expected format") from exc
