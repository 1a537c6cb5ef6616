"""
Inquiry Interview - Response Analyzer.

Turns one candidate response into a ResponseFeatures bag: a depth tier
plus element, emotion, difficulty, solution and learning tags.

The analysis is a pure function of the text. Behaviour is defined by the
keyword tables in :mod:`inquiry_interview.core.vocabulary`; the analyzer
only decides how the tables are combined.
"""

from __future__ import annotations

from typing import Mapping

from inquiry_interview.core.domain.models import DepthTier, ResponseFeatures
from inquiry_interview.core.vocabulary import (
    DIFFICULTY_FAMILIES,
    ELEMENT_FAMILIES,
    EMOTION_FAMILIES,
    EMOTION_MARKERS,
    LEARNING_FAMILIES,
    SOLUTION_FAMILIES,
    SPECIFICITY_MARKERS,
    count_markers,
    match_families,
)

Families = Mapping[str, tuple[str, ...]]

# Depth thresholds; lengths are exclusive lower bounds
PROFOUND_MIN_LENGTH = 100
PROFOUND_MIN_SPECIFICITY = 2
DEEP_MIN_LENGTH = 60
MODERATE_MIN_LENGTH = 30


class ResponseAnalyzer:
    """
    Deterministic response feature extractor.

    Holds only its keyword tables, never anything derived from earlier
    responses, so one instance can serve any number of sessions.

    Usage:
        analyzer = ResponseAnalyzer()
        features = analyzer.analyze("It was hard because we disagreed.")
        features.depth        # DepthTier.SURFACE / MODERATE / DEEP / PROFOUND
        features.elements     # ("trigger", "difficulty", ...)
    """

    def __init__(
        self,
        elements: Families = ELEMENT_FAMILIES,
        emotions: Families = EMOTION_FAMILIES,
        difficulties: Families = DIFFICULTY_FAMILIES,
        solutions: Families = SOLUTION_FAMILIES,
        learnings: Families = LEARNING_FAMILIES,
        specificity_markers: tuple[str, ...] = SPECIFICITY_MARKERS,
        emotion_markers: tuple[str, ...] = EMOTION_MARKERS,
    ):
        self._elements = elements
        self._emotions = emotions
        self._difficulties = difficulties
        self._solutions = solutions
        self._learnings = learnings
        self._specificity_markers = specificity_markers
        self._emotion_markers = emotion_markers

    def analyze(self, response: str) -> ResponseFeatures:
        """
        Extract all features from a response.

        Args:
            response: Candidate's answer text (may be empty)

        Returns:
            ResponseFeatures; an empty response yields SURFACE and no tags
        """
        text = response or ""

        return ResponseFeatures(
            depth=self.depth_of(text),
            elements=match_families(text, self._elements),
            emotions=match_families(text, self._emotions),
            difficulties=match_families(text, self._difficulties),
            solutions=match_families(text, self._solutions),
            learnings=match_families(text, self._learnings),
        )

    def depth_of(self, response: str) -> DepthTier:
        """
        Estimate response depth from length and marker counts.

        profound: length > 100, >= 2 specificity markers, >= 1 emotion marker
        deep:     length > 60 and at least one marker of either kind
        moderate: length > 30
        surface:  anything shorter
        """
        length = len(response)
        specificity = count_markers(response, self._specificity_markers)
        emotion = count_markers(response, self._emotion_markers)

        if (
            length > PROFOUND_MIN_LENGTH
            and specificity >= PROFOUND_MIN_SPECIFICITY
            and emotion >= 1
        ):
            return DepthTier.PROFOUND
        if length > DEEP_MIN_LENGTH and (specificity >= 1 or emotion >= 1):
            return DepthTier.DEEP
        if length > MODERATE_MIN_LENGTH:
            return DepthTier.MODERATE
        return DepthTier.SURFACE

    def elements_in(self, text: str) -> tuple[str, ...]:
        """Element tags present in ``text`` (used on whole transcripts too)."""
        return match_families(text, self._elements)


_default_analyzer = ResponseAnalyzer()


def analyze(response: str) -> ResponseFeatures:
    """Analyze a response with the default keyword tables."""
    return _default_analyzer.analyze(response)
