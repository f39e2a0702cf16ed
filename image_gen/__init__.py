"""
image_gen — illustrations for misconceptions (stored as <id>.png).

Public API:
  build_image_prompt(misconception, max_chars)       -> str
  truncate_text(text, max_chars)                     -> str
  generate_image(prompt, model, api_key)             -> bytes
"""

from .prompt import DEFAULT_MAX_CHARS, TEMPLATE_PATH, build_image_prompt, truncate_text
from .gemini import DEFAULT_MODEL, ImageGenerationError, generate_image

__all__ = [
    "DEFAULT_MAX_CHARS",
    "TEMPLATE_PATH",
    "build_image_prompt",
    "truncate_text",
    "DEFAULT_MODEL",
    "ImageGenerationError",
    "generate_image",
]
