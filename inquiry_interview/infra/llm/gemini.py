"""
Inquiry Interview - Gemini LLM Adapter.

Text-generation collaborator: turns a question prompt into the wording
the candidate sees. Everything that can go wrong here surfaces as an
LLMError; the renderer decides what to do about it.
"""

from __future__ import annotations

import logging

import google.generativeai as genai
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from inquiry_interview.core.config import get_settings
from inquiry_interview.core.exceptions import (
    LLMConnectionError,
    LLMRateLimitError,
    LLMResponseError,
    MissingAPIKeyError,
)

logger = logging.getLogger(__name__)


class GeminiQuestionWriter:
    """
    Gemini-powered question writer.

    Usage:
        writer = GeminiQuestionWriter()
        text = await writer.generate(prompt, style_hint="Use polite wording.")
    """

    def __init__(self, api_key: str | None = None, model_name: str | None = None):
        self._settings = get_settings()
        self._api_key = api_key or self._settings.GEMINI_API_KEY
        self._model_name = model_name or self._settings.GEMINI_MODEL
        self._model = None
        self._configured = False

    @property
    def is_available(self) -> bool:
        """Whether an API key is present at all."""
        return bool(self._api_key)

    def _configure(self) -> None:
        """Configure the Gemini API client (lazy initialization)."""
        if self._configured:
            return

        if not self._api_key:
            raise MissingAPIKeyError("GEMINI_API_KEY")

        genai.configure(api_key=self._api_key)
        self._model = genai.GenerativeModel(self._model_name)
        self._configured = True
        logger.info(f"✅ Gemini API configured ({self._model_name})")

    async def generate(self, prompt: str, style_hint: str = "") -> str:
        """
        Generate question text.

        Args:
            prompt: Prompt built from the question guidance
            style_hint: Tone instruction prepended to the prompt

        Returns:
            Raw generated text, stripped
        """
        self._configure()

        if style_hint:
            prompt = f"Style: {style_hint}\n\n{prompt}"

        return await self._generate(prompt)

    @retry(
        retry=retry_if_exception_type(LLMRateLimitError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=4),
        reraise=True,
    )
    async def _generate(self, prompt: str) -> str:
        """Internal method to call Gemini API."""
        try:
            generation_config = genai.GenerationConfig(
                temperature=self._settings.GEMINI_TEMPERATURE,
                max_output_tokens=self._settings.GEMINI_MAX_OUTPUT_TOKENS,
            )

            response = await self._model.generate_content_async(
                prompt,
                generation_config=generation_config,
            )

            if not response.text:
                raise LLMResponseError("Empty response from Gemini")

            return response.text.strip()

        except LLMResponseError:
            raise
        except genai.types.BlockedPromptException as e:
            logger.warning(f"Prompt blocked: {e}")
            raise LLMResponseError("Content was blocked by safety filters")
        except Exception as e:
            error_str = str(e).lower()
            if "429" in error_str or "rate" in error_str or "quota" in error_str:
                raise LLMRateLimitError("Gemini", retry_after=60)
            if "connection" in error_str or "network" in error_str or "503" in error_str:
                raise LLMConnectionError("Gemini", str(e))
            logger.error(f"Gemini error: {e}")
            raise LLMResponseError(str(e))
