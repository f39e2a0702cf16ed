"""
Tests for prompt building and the Gemini image call (client mocked).
"""

from types import SimpleNamespace

import pytest
from google.genai import errors as genai_errors

import image_gen.gemini as gemini
from image_gen import ImageGenerationError, build_image_prompt, generate_image, truncate_text

from conftest import make_misconception


def _response(*parts):
    content = SimpleNamespace(parts=list(parts))
    return SimpleNamespace(candidates=[SimpleNamespace(content=content)])


def _image_part(data: bytes):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="image/png"))


class _FakeModels:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def generate_content(self, *, model, contents):
        self.calls.append((model, contents))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_models(monkeypatch):
    def install(*outcomes):
        models = _FakeModels(outcomes)
        monkeypatch.setattr(gemini, "_get_client", lambda key: SimpleNamespace(models=models))
        monkeypatch.setattr(gemini.time, "sleep", lambda seconds: None)
        return models
    return install


def _rate_limited(message: str) -> genai_errors.ClientError:
    return genai_errors.ClientError(
        429, {"error": {"code": 429, "message": message, "status": "RESOURCE_EXHAUSTED"}},
    )


class TestPrompt:
    """Template filling and truncation."""

    def test_placeholders_filled(self):
        item = make_misconception(
            "Goldfish remember things for months.", category="Science", section="Biology",
            subsection="Fish",
        )
        prompt = build_image_prompt(item)
        assert "Goldfish remember things for months." in prompt
        assert "Science › Biology › Fish" in prompt
        assert "{{" not in prompt
        assert "```" not in prompt

    def test_section_without_subsection(self):
        prompt = build_image_prompt(make_misconception("Bats are not blind at all.", section="Animals"))
        assert "History › Animals\n" in prompt

    def test_long_text_truncated(self):
        text = "word " * 200
        prompt = build_image_prompt(make_misconception(text), max_chars=100)
        assert text.strip() not in prompt
        assert "…" in prompt

    def test_truncate_on_word_boundary(self):
        text = "alpha beta gamma delta epsilon"
        cut = truncate_text(text, 20)
        assert cut == "alpha beta gamma…"
        assert len(cut) <= 20

    def test_short_text_unchanged(self):
        assert truncate_text("short", 500) == "short"

    @pytest.mark.parametrize("max_chars", [0, -5])
    def test_non_positive_bound_rejected(self, max_chars):
        """A bound below one character is an error, not a slice from the end."""
        with pytest.raises(ValueError):
            truncate_text("word " * 200, max_chars)

    def test_one_character_bound(self):
        assert truncate_text("word " * 200, 1) == "…"

    def test_missing_template(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_image_prompt(make_misconception("x" * 30), template_path=tmp_path / "none.md")


class TestGenerateImage:
    """Response handling and rate-limit retries."""

    def test_returns_first_inline_image(self, fake_models):
        text_part = SimpleNamespace(inline_data=None, text="caption")
        models = fake_models(_response(text_part, _image_part(b"\x89PNG")))
        assert generate_image("prompt", api_key="k") == b"\x89PNG"
        assert models.calls == [(gemini.DEFAULT_MODEL, "prompt")]

    def test_no_image(self, fake_models):
        fake_models(_response(SimpleNamespace(inline_data=None)))
        with pytest.raises(ImageGenerationError, match="no image"):
            generate_image("prompt", api_key="k")

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(ValueError, match="GEMINI_API_KEY"):
            generate_image("prompt")

    def test_rate_limit_retried(self, fake_models):
        models = fake_models(_rate_limited("Please retry in 1.5s."), _response(_image_part(b"img")))
        assert generate_image("prompt", api_key="k") == b"img"
        assert len(models.calls) == 2

    def test_daily_quota_not_retried(self, fake_models):
        models = fake_models(_rate_limited("Quota exceeded: GenerateRequestsPerDayPerProject"))
        with pytest.raises(ImageGenerationError, match="Daily"):
            generate_image("prompt", api_key="k")
        assert len(models.calls) == 1

    def test_retries_exhausted(self, fake_models):
        fake_models(*[_rate_limited("retry in 1s") for _ in range(3)])
        with pytest.raises(ImageGenerationError, match="after 2 retries"):
            generate_image("prompt", api_key="k", max_retries=2)
