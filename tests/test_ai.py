import asyncio
import json

import httpx

from aminpur.services.ai import EMPTY_ANSWER, FAILED_ANSWER, build_prompt, generate_description


def _run(handler, api_key="k"):
    return asyncio.run(
        generate_description(
            "আমিনপুর কলেজ", "শিক্ষা",
            api_key=api_key,
            model="gemini-test",
            base_url="https://gemini.example/v1beta",
            transport=httpx.MockTransport(handler),
        )
    )


def test_returns_generated_text():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": " সুন্দর বর্ণনা "}]}}]})

    assert _run(handler) == "সুন্দর বর্ণনা"
    assert seen["url"] == "https://gemini.example/v1beta/models/gemini-test:generateContent"
    assert seen["key"] == "k"
    assert "আমিনপুর কলেজ" in seen["body"]["contents"][0]["parts"][0]["text"]


def test_empty_answer_gets_apology():
    assert _run(lambda r: httpx.Response(200, json={"candidates": []})) == EMPTY_ANSWER


def test_http_error_gets_fallback():
    assert _run(lambda r: httpx.Response(500, json={"error": {}})) == FAILED_ANSWER


def test_missing_key_skips_call():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    assert _run(handler, api_key="") == FAILED_ANSWER
    assert calls == []


def test_prompt_mentions_bengali_and_limit():
    prompt = build_prompt("X", "Y")
    assert "Bengali" in prompt
    assert "150 words" in prompt
