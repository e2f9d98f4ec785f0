import logging
import os
from typing import Optional, Sequence

from dotenv import load_dotenv
from google import genai

from ..prompts.explain_prompt import StepLike, generate_explain_prompt


load_dotenv()

logger = logging.getLogger(__name__)

GENAI_MODEL = os.getenv('GENAI_MODEL', 'gemini-2.5-flash')
GENAI_TEMPERATURE = float(os.getenv('GENAI_TEMPERATURE', '0.4'))

NO_KEY_MESSAGE = "API Key not configured."
EMPTY_RESPONSE_MESSAGE = "No explanation generated."
FAILURE_MESSAGE = "Failed to retrieve explanation from AI."


def _get_genai_client(api_key: Optional[str] = None) -> Optional[genai.Client]:
    """
    Create a Gemini client, or return None when no key is configured.

    The key is read from GOOGLE_API_KEY or GEMINI_API_KEY unless an
    explicit key is provided. Explanations are optional, so a missing key
    only disables them.
    """
    key = api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
    if not key:
        logger.warning("No GOOGLE_API_KEY or GEMINI_API_KEY found. AI explanations will be disabled.")
        return None
    client = genai.Client(api_key=key)
    logger.info(f"GenAI client initialized with model: {GENAI_MODEL}")
    return client


genai_client = _get_genai_client()


def extract_text(response) -> str:
    """Pull the text out of a generate_content response."""
    if not response:
        return ""

    text = getattr(response, 'text', None)
    if isinstance(text, str) and text.strip():
        return text.strip()

    # Fall back to candidates[0].content.parts
    candidates = getattr(response, 'candidates', None) or []
    if candidates:
        content = getattr(candidates[0], 'content', None)
        parts = getattr(content, 'parts', None) or []
        text_parts = [str(part.text) for part in parts if getattr(part, 'text', None)]
        if text_parts:
            return '\n'.join(text_parts).strip()

    logger.error(f"extract_text: no text found in response of type {type(response)}")
    return ""


def explain_solution(cap_a: int, cap_b: int, goal: int, steps: Sequence[StepLike], client=None) -> str:
    """
    Ask Gemini for a short natural-language explanation of a solution.

    Never raises: a missing key, an API error or an empty reply map to
    fixed messages the UI can show as-is.
    """
    client = client or genai_client
    if client is None:
        return NO_KEY_MESSAGE

    prompt = generate_explain_prompt(cap_a, cap_b, goal, steps)
    try:
        resp = client.models.generate_content(
            model=GENAI_MODEL,
            contents=prompt,
            config=genai.types.GenerateContentConfig(
                temperature=GENAI_TEMPERATURE,
            ),
        )
    except Exception as e:
        logger.error(f"Gemini API Error: {e}")
        return FAILURE_MESSAGE

    text = extract_text(resp)
    return text if text else EMPTY_RESPONSE_MESSAGE
