"""
image_gen/prompt.py — building the image prompt for one misconception.

Public functions:
  truncate_text(text, max_chars)                       -> str
  build_image_prompt(misconception, max_chars, template_path) -> str
"""

from __future__ import annotations

import pathlib

from data_model.misconceptions import Misconception

TEMPLATE_PATH     = pathlib.Path(__file__).resolve().parent / "templates" / "image-prompt.md"
DEFAULT_MAX_CHARS = 500


def truncate_text(text: str, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    """Cuts `text` to at most `max_chars`, on a word boundary when possible."""
    if max_chars < 1:
        raise ValueError(f"max_chars must be >= 1, got {max_chars}")
    if len(text) <= max_chars:
        return text
    cut = text[: max_chars - 1]
    space = cut.rfind(" ")
    if space > max_chars // 2:
        cut = cut[:space]
    return cut.rstrip() + "…"


def _load_template(template_path: pathlib.Path) -> str:
    """Reads the template and strips the ```text / ``` fence."""
    body = template_path.read_text(encoding="utf-8").strip()
    if body.startswith("```text"):
        body = body[len("```text"):].lstrip("\n")
    if body.endswith("```"):
        body = body[: body.rfind("```")].rstrip()
    return body


def build_image_prompt(
    misconception: Misconception,
    max_chars: int = DEFAULT_MAX_CHARS,
    template_path: pathlib.Path = TEMPLATE_PATH,
) -> str:
    """
    Fills the template placeholders for one misconception.

    Args:
        misconception: Record to illustrate.
        max_chars:     Bound on the text payload sent to the model.
        template_path: Path to image-prompt.md.
    """
    if not template_path.exists():
        raise FileNotFoundError(f"Missing template file: {template_path}")

    section = misconception.section
    if misconception.subsection:
        section = f"{section} › {misconception.subsection}"

    return (
        _load_template(template_path)
        .replace("{{CATEGORY}}", misconception.category)
        .replace("{{SECTION}}",  section)
        .replace("{{TEXT}}",     truncate_text(misconception.text, max_chars))
    )
