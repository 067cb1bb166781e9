from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import settings

logger = logging.getLogger(__name__)

EMPTY_ANSWER = "দুঃখিত, বর্ণনা তৈরি করা সম্ভব হয়নি।"
FAILED_ANSWER = "AI বর্ণনা তৈরিতে সমস্যা হয়েছে। অনুগ্রহ করে আবার চেষ্টা করুন।"


def build_prompt(title: str, category: str) -> str:
    return (
        f'Generate a short, engaging description in Bengali for a content piece titled "{title}" '
        f'in the category of "{category}". The tone should be professional yet appealing. '
        "Limit to 150 words."
    )


def _extract_text(data: dict) -> str:
    parts = []
    for cand in data.get("candidates") or []:
        for part in ((cand.get("content") or {}).get("parts") or []):
            if part.get("text"):
                parts.append(part["text"])
        if parts:
            break
    return "".join(parts).strip()


async def generate_description(
    title: str,
    category: str,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Ask Gemini for a short Bengali description. Never raises: on any
    problem the admin gets a readable fallback text instead.
    """
    api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
    model = model or settings.GEMINI_MODEL
    base_url = (base_url or settings.GEMINI_API_URL).rstrip("/")

    if not api_key:
        logger.warning("AI description skipped: GEMINI_API_KEY is not set")
        return FAILED_ANSWER

    url = f"{base_url}/models/{model}:generateContent"
    payload = {"contents": [{"parts": [{"text": build_prompt(title, category)}]}]}
    async with httpx.AsyncClient(timeout=30, transport=transport) as c:
        try:
            resp = await c.post(url, json=payload, headers={"x-goog-api-key": api_key})
            resp.raise_for_status()
            text = _extract_text(resp.json())
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning("Gemini error: %s", e.__class__.__name__)
            return FAILED_ANSWER
    return text or EMPTY_ANSWER
