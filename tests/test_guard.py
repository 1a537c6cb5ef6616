"""
Unit tests for the ResponseGuard module.
"""

import pytest

from inquiry_interview.app.guard import ResponseGuard


class TestResponseGuard:
    """Test suite for ResponseGuard class."""

    @pytest.fixture
    def guard(self):
        return ResponseGuard()

    @pytest.mark.parametrize("answer", [
        "I came here by time machine.",
        "Doraemon brought me.",
        "Whatever.",
        "hahaha",
        "I dunno",
    ])
    def test_joking_answers_are_flagged(self, guard, answer):
        assert guard.is_not_serious("How did you get here today?", answer)

    def test_serious_answer_passes(self, guard):
        assert not guard.is_not_serious("How did you get here today?", "I came by train with my mother.")

    def test_empty_answer_passes(self, guard):
        """Silence is handled by the interview flow, not treated as a joke."""
        assert not guard.is_not_serious("How did you get here today?", "   ")

    def test_pastime_flagged_for_activity_question(self, guard):
        question = "Please tell me about the inquiry activity you are working on."

        assert guard.is_not_serious(question, "Mostly playing games at home.")

    def test_pastime_allowed_elsewhere(self, guard):
        question = "How do you relax after practice?"

        assert not guard.is_not_serious(question, "Mostly playing games at home.")
