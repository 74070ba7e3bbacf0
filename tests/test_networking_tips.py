import json
from unittest.mock import AsyncMock, patch

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from blu_networking.ai.tips import build_prompt_variables, generate_networking_tips
from blu_networking.core.exceptions import ExternalServiceError
from blu_networking.domain.schemas.networking_tips import NetworkingProfile, NetworkingTipsResponse

TIPS_PAYLOAD = {
    "tips": [
        {"category": "conversation_starter", "tip": "Ask about their latest project.", "reasoning": "Opens up."},
        {"category": "follow_up", "tip": "Send a note within 24 hours."},
    ],
    "summary": "Lead with curiosity and follow up quickly.",
}


def _fake_llm(*responses):
    return FakeListChatModel(responses=list(responses))


def test_prompt_variables_fill_missing_fields():
    variables = build_prompt_variables(NetworkingProfile(full_name="Alice", company="Acme", goal="Find clients"))

    assert variables["full_name"] == "Alice"
    assert variables["industry"] == "Not specified"
    assert variables["company"] == "Acme"
    assert "Find clients" in variables["goal_line"]
    assert variables["event_type_line"] == ""


async def test_generate_tips_parses_model_json():
    with patch("blu_networking.ai.tips.get_llm", return_value=_fake_llm(json.dumps(TIPS_PAYLOAD))):
        result = await generate_networking_tips(NetworkingProfile(full_name="Alice"))

    assert isinstance(result, NetworkingTipsResponse)
    assert len(result.tips) == 2
    assert result.tips[1].reasoning is None


async def test_generate_tips_rejects_wrong_shape():
    with patch("blu_networking.ai.tips.get_llm", return_value=_fake_llm(json.dumps({"tips": []}))):
        with pytest.raises(ExternalServiceError, match="did not match the expected format"):
            await generate_networking_tips(NetworkingProfile(full_name="Alice"))


async def test_generate_tips_rejects_non_json():
    with patch("blu_networking.ai.tips.get_llm", return_value=_fake_llm("Sure! Here are some tips...")):
        with pytest.raises(ExternalServiceError, match="Failed to generate networking tips"):
            await generate_networking_tips(NetworkingProfile(full_name="Alice"))


def test_route_overrides_profile_with_request(client, make_user, login):
    make_user("alice", industry="Finance")
    login("alice")
    mocked = AsyncMock(return_value=NetworkingTipsResponse.model_validate(TIPS_PAYLOAD))

    with patch("blu_networking.interfaces.api.networking_tips.generate_networking_tips", mocked):
        response = client.post("/api/networking-tips", json={"company": "NewCo", "eventType": "Mixer"})

    assert response.status_code == 200
    assert response.json()["summary"] == TIPS_PAYLOAD["summary"]
    profile = mocked.await_args.args[0]
    assert profile.full_name == "Alice"
    assert profile.industry == "Finance"
    assert profile.company == "NewCo"
    assert profile.event_type == "Mixer"


def test_route_reports_model_failure(client, make_user, login):
    make_user("alice")
    login("alice")

    with patch("blu_networking.ai.tips.get_llm", return_value=_fake_llm(json.dumps({"summary": "no tips"}))):
        response = client.post("/api/networking-tips", json={})

    assert response.status_code == 500
    assert response.json() == {
        "message": "Failed to generate networking tips: response did not match the expected format"
    }


def test_route_requires_session(client):
    client.cookies.clear()
    assert client.post("/api/networking-tips", json={}).status_code == 401
