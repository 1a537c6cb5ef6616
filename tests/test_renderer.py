"""
Unit tests for the QuestionRenderer module.

The text-generation collaborator is replaced by small fakes; no network.
"""

import asyncio

import pytest

from inquiry_interview.app.engine import generic_probe
from inquiry_interview.app.renderer import QuestionRenderer, build_prompt, normalize_question
from inquiry_interview.core.domain.models import Category, Phase
from inquiry_interview.core.exceptions import LLMRateLimitError, MissingAPIKeyError


class FakeWriter:
    """Returns a fixed reply and records the prompts it was given."""

    def __init__(self, reply="How did you get started with soccer?"):
        self.reply = reply
        self.prompts = []

    async def generate(self, prompt, style_hint=""):
        self.prompts.append((prompt, style_hint))
        return self.reply


class SlowWriter:
    async def generate(self, prompt, style_hint=""):
        await asyncio.sleep(1)
        return "This answer arrives far too late?"


class FailingWriter:
    def __init__(self, error):
        self.error = error

    async def generate(self, prompt, style_hint=""):
        raise self.error


def _render(renderer, question, phase=Phase.EXPLORATION, **kwargs):
    return asyncio.run(renderer.render(
        question,
        category=Category.COMPETITIVE_SPORTS,
        phase=phase,
        **kwargs,
    ))


class TestQuestionRenderer:
    """Test suite for QuestionRenderer class."""

    @pytest.fixture
    def trigger_question(self, catalog):
        return catalog.entry(Category.COMPETITIVE_SPORTS, Phase.EXPLORATION).find("sports_2")

    # =========================================================================
    # Collaborator Tests
    # =========================================================================

    def test_uses_collaborator_output(self, trigger_question):
        writer = FakeWriter()
        renderer = QuestionRenderer(writer=writer, timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question, activity_text="soccer", latest_response="I play soccer.")

        assert rendered.text == "How did you get started with soccer?"
        assert rendered.source == "llm"
        assert not rendered.is_fallback

    def test_prompt_carries_guidance_and_style(self, trigger_question):
        writer = FakeWriter()
        renderer = QuestionRenderer(writer=writer, timeout_seconds=1.0)

        _render(renderer, trigger_question, latest_response="I play soccer.")

        prompt, style_hint = writer.prompts[0]
        assert trigger_question.guidance.topic in prompt
        assert "I play soccer." in prompt
        assert "encouraging" in style_hint

    def test_missing_question_mark_is_added(self, trigger_question):
        renderer = QuestionRenderer(writer=FakeWriter("Tell me how it all began."), timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question)

        assert rendered.text == "Tell me how it all began?"

    # =========================================================================
    # Fallback Tests
    # =========================================================================

    def test_timeout_falls_back(self, trigger_question):
        renderer = QuestionRenderer(writer=SlowWriter(), timeout_seconds=0.05)

        rendered = _render(renderer, trigger_question, keyword="soccer")

        assert rendered.is_fallback
        assert rendered.text == "What got you started with soccer?"

    def test_collaborator_error_falls_back(self, trigger_question):
        renderer = QuestionRenderer(writer=FailingWriter(LLMRateLimitError("Gemini")), timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question)

        assert rendered.is_fallback
        assert "your activity" in rendered.text

    def test_unexpected_collaborator_error_falls_back(self, trigger_question):
        renderer = QuestionRenderer(writer=FailingWriter(ConnectionError("offline")), timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question, keyword="soccer")

        assert rendered.is_fallback
        assert rendered.text == "What got you started with soccer?"

    def test_zero_timeout_is_respected(self, trigger_question):
        renderer = QuestionRenderer(writer=SlowWriter(), timeout_seconds=0)

        rendered = _render(renderer, trigger_question)

        assert rendered.is_fallback

    def test_missing_api_key_falls_back(self, trigger_question):
        renderer = QuestionRenderer(writer=FailingWriter(MissingAPIKeyError("GEMINI_API_KEY")), timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question, keyword="soccer")

        assert rendered.is_fallback

    def test_short_output_falls_back(self, trigger_question):
        renderer = QuestionRenderer(writer=FakeWriter("Why?"), timeout_seconds=1.0)

        rendered = _render(renderer, trigger_question, keyword="soccer")

        assert rendered.is_fallback

    def test_fallback_by_question_id(self, catalog):
        question = catalog.entry(Category.COMPETITIVE_SPORTS, Phase.OPENING).find("opening_2")
        renderer = QuestionRenderer(writer=FakeWriter(), timeout_seconds=1.0)

        rendered = renderer.fallback(question, Phase.OPENING)

        assert rendered.text == "How did you get here today?"

    def test_fallback_for_generic_probe(self):
        renderer = QuestionRenderer(writer=FakeWriter(), timeout_seconds=1.0)

        rendered = renderer.fallback(generic_probe(Phase.EXPLORATION), Phase.EXPLORATION, "soccer")

        assert rendered.question_id == "exploration_probe"
        assert "soccer" in rendered.text


class TestRenderingHelpers:
    """Test suite for prompt building and output normalisation."""

    def test_normalize_rejects_short_text(self):
        assert normalize_question("Why?") is None
        assert normalize_question("") is None
        assert normalize_question(None) is None

    def test_normalize_strips_quotes(self):
        assert normalize_question('"What did you notice?"') == "What did you notice?"

    def test_normalize_keeps_full_width_question_mark(self):
        assert normalize_question("What did you notice？") == "What did you notice？"

    def test_build_prompt_without_answer(self, catalog):
        question = catalog.entry(Category.COMPETITIVE_SPORTS, Phase.OPENING).find("opening_1")

        prompt = build_prompt(question, category=Category.COMPETITIVE_SPORTS, phase=Phase.OPENING)

        assert "(no answer yet)" in prompt
        assert "competitive sports" in prompt
