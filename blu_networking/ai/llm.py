"""Chat model configuration - supports OpenAI and Gemini."""

from blu_networking.config import get_settings
from blu_networking.core.exceptions import ExternalServiceError

settings = get_settings()


def get_llm():
    """Get the configured chat model, set up for JSON-only replies."""
    if settings.AI_PROVIDER == "openai":
        if not settings.OPENAI_API_KEY:
            raise ExternalServiceError("Failed to generate networking tips: OPENAI_API_KEY is not configured")
        from langchain_openai import ChatOpenAI
        llm = ChatOpenAI(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            temperature=0.7,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
        return llm.bind(response_format={"type": "json_object"})
    else:
        if not settings.GEMINI_API_KEY:
            raise ExternalServiceError("Failed to generate networking tips: GEMINI_API_KEY is not configured")
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(
            google_api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            temperature=0.7,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0,
            response_mime_type="application/json",
        )
