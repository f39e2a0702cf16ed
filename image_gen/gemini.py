"""
image_gen/gemini.py — image generation through the Gemini API.

Environment variable:
  GEMINI_API_KEY   API key (required)

Optionally a .env file in the project root:
  GEMINI_API_KEY=AIza...

Public API:
  generate_image(prompt, model, api_key, max_retries) -> bytes
  ImageGenerationError
"""

from __future__ import annotations

import functools
import itertools
import logging
import os
import re
import time
from typing import Any, Protocol, cast

from google import genai as _genai
from google.genai import errors as _genai_errors

log = logging.getLogger(__name__)

DEFAULT_MODEL   = "gemini-2.5-flash-image"
DEFAULT_RETRIES = 3
_ENV_KEY        = "GEMINI_API_KEY"


class ImageGenerationError(RuntimeError):
    """The model produced no image, or the quota/retries ran out."""


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> "_genai.Client":
    """Returns (and caches) a Gemini client for the given key.

    The client owns an HTTP connection pool; building one per image
    exhausts connections in long batch runs.
    """
    return _genai.Client(api_key=api_key)


# Seconds to wait, as suggested in the API message (e.g. "retry in 18.8s")
_RETRY_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


class _GeminiModelsAPI(Protocol):
    def generate_content(self, *, model: str, contents: str) -> Any:
        ...


def _parse_retry_delay(error: Exception) -> float | None:
    """Extracts the suggested wait from a 429 error, if present."""
    m = _RETRY_DELAY_RE.search(str(error))
    if m:
        return float(m.group(1))
    delay = getattr(error, "retry_delay", None)
    if delay is not None:
        return float(delay)
    return None


def _is_daily_quota(error: Exception) -> bool:
    """True for an exhausted daily quota (retrying will not help)."""
    return "PerDay" in str(error)


def _first_image(response: Any) -> bytes | None:
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is not None and getattr(inline, "data", None):
                return inline.data
    return None


def generate_image(
    prompt: str,
    model: str = DEFAULT_MODEL,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> bytes:
    """
    Sends the prompt to an image-capable Gemini model and returns image bytes.

    On 429 (rate limit) waits the suggested time and retries up to
    max_retries times. An exhausted daily quota is not retried.

    Args:
        prompt:      Ready prompt text.
        model:       Model identifier (default gemini-2.5-flash-image).
        api_key:     API key; read from GEMINI_API_KEY when None.
        max_retries: Max retries on rate limit (default 3).

    Returns:
        Bytes of the first inline image in the response (PNG).

    Raises:
        ValueError:                   Missing API key.
        ImageGenerationError:         No image, daily quota, retries exhausted.
        google.genai.errors.APIError: Any other API failure.
    """
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Missing Gemini API key. Set the {_ENV_KEY} environment variable or pass api_key."
        )

    models_api = cast(_GeminiModelsAPI, _get_client(key).models)

    for attempt in itertools.count(1):
        try:
            response = models_api.generate_content(model=model, contents=prompt)
        except _genai_errors.ClientError as exc:
            if exc.code != 429:
                raise
            time.sleep(_backoff(exc, model, attempt, max_retries))
            continue

        data = _first_image(response)
        if data is None:
            raise ImageGenerationError(f"Model {model} returned no image.")
        return data


def _backoff(exc: Exception, model: str, attempt: int, max_retries: int) -> float:
    """Seconds to wait before retry number `attempt`; raises when retrying is pointless."""
    if _is_daily_quota(exc):
        raise ImageGenerationError(
            f"Daily request limit for model {model} exhausted. Details: {exc}"
        ) from exc
    if attempt > max_retries:
        raise ImageGenerationError(
            f"Rate-limited after {max_retries} retries. Try again later."
        ) from exc

    delay = _parse_retry_delay(exc) or (2 ** attempt * 5)
    log.warning("429 rate limit on %s, waiting %.0fs (attempt %d/%d)", model, delay, attempt, max_retries)
    return delay
