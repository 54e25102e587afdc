"""Google Gemini API wrapper with error handling."""

import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_clients: dict[str, genai.Client] = {}


def get_client(api_key: str | None = None) -> genai.Client | None:
    """Client for the given key, or the configured one; None when unset."""
    api_key = settings.gemini_api_key if api_key is None else api_key
    if not api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if api_key not in _clients:
        _clients[api_key] = genai.Client(api_key=api_key)
    return _clients[api_key]


def strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_text(
    prompt: str,
    system_instruction: str = "",
    api_key: str | None = None,
    model: str | None = None,
    temperature: float = 0.35,
    max_output_tokens: int = 2000,
) -> str | None:
    """Send a prompt to Gemini and return the answer text, or None on failure."""
    client = get_client(api_key)
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=model or settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction or None,
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
        return strip_code_fences(response.text or "")

    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
