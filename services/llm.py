import os, httpx

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
BASE = os.getenv("GEMINI_BASE", "https://generativelanguage.googleapis.com/v1beta")
MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-exp")

if not GEMINI_API_KEY:
    print("🚨 ERROR: GEMINI_API_KEY not found in environment variables")
    print("Please create a .env file with your API key")


class LLMError(Exception):
    """Raised when the Gemini call does not yield generated text."""


def _error_message(r: httpx.Response) -> str:
    message = None
    try:
        err = r.json().get("error")
        if isinstance(err, dict):
            message = err.get("message")
    except (ValueError, AttributeError):
        pass
    return message or r.text[:200] or r.reason_phrase


def _extract_text(data) -> str:
    if not isinstance(data, dict):
        raise LLMError("Malformed response from Gemini")
    feedback = data.get("promptFeedback") or {}
    if not isinstance(feedback, dict):
        raise LLMError("Malformed response from Gemini")
    if feedback.get("blockReason"):
        raise LLMError(f"Prompt blocked by Gemini: {feedback['blockReason']}")

    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise LLMError("Malformed response from Gemini")
    if not candidates:
        raise LLMError("No valid response from Gemini.")
    first = candidates[0]
    content = (first.get("content") or {}) if isinstance(first, dict) else None
    if not isinstance(content, dict):
        raise LLMError("Malformed response from Gemini")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise LLMError("Malformed response from Gemini")
    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    if not texts:
        raise LLMError("No valid response from Gemini.")
    return "".join(texts)


async def complete(system: str, prompt: str) -> str:
    """Send one generateContent request and return the generated text as is.

    There is no retry and no timeout; any failure is raised as LLMError.
    """
    if not GEMINI_API_KEY:
        raise LLMError("GEMINI_API_KEY is not configured")

    headers = {
        "x-goog-api-key": GEMINI_API_KEY,
        "Content-Type": "application/json",
    }
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if system:
        payload["systemInstruction"] = {"parts": [{"text": system}]}

    try:
        async with httpx.AsyncClient(timeout=None) as client:
            r = await client.post(f"{BASE}/models/{MODEL}:generateContent", headers=headers, json=payload)
    except httpx.HTTPError as e:
        print("🚨 Gemini API Error:", e)
        raise LLMError(f"Gemini request failed: {e}") from e

    if r.is_error:
        message = _error_message(r)
        print(f"🚨 Gemini API Error: {r.status_code} → {message}")
        raise LLMError(message)

    try:
        return _extract_text(r.json())
    except ValueError as e:
        print("🚨 Gemini API Error: malformed response", e)
        raise LLMError("Malformed response from Gemini") from e
    except LLMError as e:
        print("🚨 Gemini API Error:", e)
        raise
