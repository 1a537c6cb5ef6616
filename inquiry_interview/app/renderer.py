"""
Inquiry Interview - Question Renderer.

Boundary between the decision core and the text-generation collaborator.
A chosen QuestionSpec is turned into a prompt and sent to the writer under
a hard timeout. If the writer is missing, slow, or fails, the question is
worded from deterministic templates instead, so rendering never blocks the
interview.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from inquiry_interview.core.config import get_settings
from inquiry_interview.core.domain.models import Category, Phase, QuestionSpec
from inquiry_interview.core.exceptions import LLMTimeoutError, InterviewAIError
from inquiry_interview.core.prompts import (
    FALLBACK_BY_INTENT,
    FALLBACK_BY_QUESTION,
    GENERIC_PROBES,
    INTERVIEWER_PERSONA,
    QUESTION_PROMPT,
    STYLE_HINTS,
)
from inquiry_interview.infra.llm.gemini import GeminiQuestionWriter


logger = logging.getLogger(__name__)

MIN_QUESTION_LENGTH = 10
DEFAULT_KEYWORD = "your activity"


@dataclass(frozen=True)
class RenderedQuestion:
    """Final wording of a question and where it came from."""

    question_id: str
    text: str
    source: str  # "llm", "fallback" or "reminder"

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


class QuestionRenderer:
    """
    Renders QuestionSpecs through the collaborator with a template fallback.

    Usage:
        renderer = QuestionRenderer()
        rendered = await renderer.render(
            decision.question,
            category=decision.category,
            phase=decision.phase,
            activity_text=activity,
            latest_response=answer,
            keyword="soccer",
        )
    """

    def __init__(
        self,
        writer: GeminiQuestionWriter | None = None,
        timeout_seconds: float | None = None,
    ):
        self._settings = get_settings()
        self._writer = writer if writer is not None else GeminiQuestionWriter()
        self._timeout = (
            timeout_seconds if timeout_seconds is not None else self._settings.RENDER_TIMEOUT_SECONDS
        )

    async def render(
        self,
        question: QuestionSpec,
        *,
        category: Category,
        phase: Phase,
        activity_text: str = "",
        latest_response: str = "",
        depth: int = 1,
        keyword: str | None = None,
    ) -> RenderedQuestion:
        """
        Word a question, preferring the collaborator.

        Returns:
            RenderedQuestion; never raises for collaborator problems
        """
        prompt = build_prompt(
            question,
            category=category,
            phase=phase,
            activity_text=activity_text,
            latest_response=latest_response,
            depth=depth,
        )
        style_hint = STYLE_HINTS.get(question.guidance.tone.value, "")

        try:
            raw = await self._generate_with_timeout(prompt, style_hint)
        except InterviewAIError as e:
            logger.warning(f"⚠️ Collaborator unavailable for {question.id}, using template: {e}")
            return self.fallback(question, phase, keyword)
        except Exception as e:
            logger.error(f"❌ Collaborator failed for {question.id}, using template: {e!r}")
            return self.fallback(question, phase, keyword)

        text = normalize_question(raw)
        if text is None:
            logger.warning(f"⚠️ Collaborator output rejected for {question.id}: {raw!r}")
            return self.fallback(question, phase, keyword)

        return RenderedQuestion(question_id=question.id, text=text, source="llm")

    async def _generate_with_timeout(self, prompt: str, style_hint: str) -> str:
        try:
            return await asyncio.wait_for(
                self._writer.generate(prompt, style_hint=style_hint),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise LLMTimeoutError("Gemini", self._timeout) from e

    def fallback(self, question: QuestionSpec, phase: Phase, keyword: str | None = None) -> RenderedQuestion:
        """Deterministic wording: by question id, then intent, then phase probe."""
        template = (
            FALLBACK_BY_QUESTION.get(question.id)
            or GENERIC_PROBES.get(question.id)
            or FALLBACK_BY_INTENT.get(question.intent.value)
            or GENERIC_PROBES[f"{phase.value}_probe"]
        )
        text = template.format(keyword=keyword or DEFAULT_KEYWORD)
        return RenderedQuestion(question_id=question.id, text=text, source="fallback")


def build_prompt(
    question: QuestionSpec,
    *,
    category: Category,
    phase: Phase,
    activity_text: str = "",
    latest_response: str = "",
    depth: int = 1,
) -> str:
    """Fill the question prompt from a QuestionSpec's guidance."""
    guidance = question.guidance
    return QUESTION_PROMPT.format(
        persona=INTERVIEWER_PERSONA,
        phase=phase.value,
        category=category.value.replace("_", " "),
        depth=depth,
        intent=question.intent.value.replace("_", " "),
        topic=guidance.topic,
        elements=", ".join(guidance.elements) or "none",
        context=guidance.context or "none",
        activity=activity_text or "(not given)",
        latest_response=latest_response or "(no answer yet)",
    )


def normalize_question(text: str | None) -> str | None:
    """
    Clean up generated text.

    Returns:
        The question ending in a question mark, or None if it is too short
        to be a real question
    """
    if not text:
        return None

    cleaned = text.strip().strip('"').strip()
    if len(cleaned) < MIN_QUESTION_LENGTH:
        return None

    if "?" not in cleaned and "？" not in cleaned:
        cleaned = cleaned.rstrip(".") + "?"
    return cleaned
