"""
Inquiry Interview - Response Guard.

Spots answers that are clearly not serious (fantasy travel, cartoon
characters, laughter, "whatever") so the interviewer can ask the candidate
to answer properly instead of treating the text as evidence.
"""

from __future__ import annotations

from typing import ClassVar

from inquiry_interview.core.vocabulary import contains_any


class ResponseGuard:
    """
    Keyword check for joking or evasive answers.

    Usage:
        guard = ResponseGuard()
        if guard.is_not_serious(question_text, answer):
            ...  # remind and repeat the question
    """

    JOKING_TERMS: ClassVar[tuple[str, ...]] = (
        # Fantasy travel and powers
        "time machine", "teleport*", "magic carpet", "superpower*",
        "ufo", "spaceship", "flew here", "flying carpet",
        # Characters
        "doraemon", "pokemon", "pikachu", "mario", "naruto",
        # Evasion
        "whatever", "don't care", "dunno", "too lazy", "boring question",
        # Laughter and noises
        "haha*", "hehe*", "lmao", "meow", "woof",
    )

    # Only checked when the question asks about the inquiry activity
    PASTIME_TERMS: ClassVar[tuple[str, ...]] = (
        "watching tv", "watch tv", "playing games", "play games",
        "sleeping", "sleep all day", "scrolling", "social media",
    )

    ACTIVITY_QUESTION_TERMS: ClassVar[tuple[str, ...]] = (
        "inquiry", "activity", "working on", "main topic",
    )

    def is_not_serious(self, question_text: str, answer: str) -> bool:
        """
        Check whether an answer should be rejected as not serious.

        Args:
            question_text: The question as worded to the candidate
            answer: The candidate's answer

        Returns:
            True if the answer looks like a joke or an evasion
        """
        if not answer or not answer.strip():
            return False

        if contains_any(question_text or "", self.ACTIVITY_QUESTION_TERMS):
            if contains_any(answer, self.PASTIME_TERMS):
                return True

        return contains_any(answer, self.JOKING_TERMS)
