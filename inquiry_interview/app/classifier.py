"""
Inquiry Interview - Activity Classifier.

Chooses the interviewing style (Category) from the candidate's description
of their inquiry activity.

Each category scores 0-10: every distinct keyword found adds its tier
weight (primary 4, method 3, social 2, affect 1) and the sum is capped at
10. The highest score wins. Exact ties go to the category listed first in
CATEGORY_PRIORITY; a description that matches nothing falls back to
FALLBACK_CATEGORY.
"""

from __future__ import annotations

import logging
from typing import Mapping

from inquiry_interview.core.domain.models import Category
from inquiry_interview.core.vocabulary import (
    CATEGORY_KEYWORDS,
    TIER_WEIGHTS,
    matched_terms,
)


logger = logging.getLogger(__name__)

MAX_CATEGORY_SCORE = 10

# Only consulted when two categories have exactly the same score
CATEGORY_PRIORITY: tuple[Category, ...] = (
    Category.COLLABORATIVE_ARTISTIC,
    Category.INDIVIDUAL_SCIENTIFIC,
    Category.COMPETITIVE_SPORTS,
    Category.TECHNICAL_CREATIVE,
    Category.SOCIAL_PROBLEM_SOLVING,
    Category.LEADERSHIP_CONSENSUS,
)

FALLBACK_CATEGORY = Category.COLLABORATIVE_ARTISTIC

KeywordTable = Mapping[Category, Mapping[str, tuple[str, ...]]]


class ActivityClassifier:
    """
    Rule-based activity classifier.

    Usage:
        classifier = ActivityClassifier()
        category = classifier.classify("soccer practice every day with my team")
        classifier.scores("...")            # {Category: int}
        classifier.primary_keyword("...")   # "soccer"
    """

    def __init__(
        self,
        keywords: KeywordTable = CATEGORY_KEYWORDS,
        priority: tuple[Category, ...] = CATEGORY_PRIORITY,
        fallback: Category = FALLBACK_CATEGORY,
        tier_weights: Mapping[str, int] = TIER_WEIGHTS,
    ):
        if set(priority) != set(keywords):
            raise ValueError("Priority order must list every category exactly once")
        self._keywords = keywords
        self._priority = priority
        self._fallback = fallback
        self._tier_weights = tier_weights

    def score(self, activity_text: str, category: Category) -> int:
        """Bounded 0-10 score of ``activity_text`` for one category."""
        total = 0
        for tier, terms in self._keywords[category].items():
            hits = matched_terms(activity_text, terms)
            total += self._tier_weights.get(tier, 0) * len(hits)
        return min(total, MAX_CATEGORY_SCORE)

    def scores(self, activity_text: str) -> dict[Category, int]:
        """Scores for every category, in priority order."""
        text = activity_text or ""
        return {category: self.score(text, category) for category in self._priority}

    def classify(self, activity_text: str) -> Category:
        """
        Pick the best matching category.

        Args:
            activity_text: Free-text description of the inquiry activity

        Returns:
            The highest-scoring category; ties resolved by priority order,
            the fallback category when nothing matches
        """
        scores = self.scores(activity_text)
        best_score = max(scores.values(), default=0)

        if best_score == 0:
            logger.debug("No category keywords matched, using fallback")
            return self._fallback

        # scores is ordered by priority, so the first maximum wins ties
        best = next(c for c, s in scores.items() if s == best_score)
        logger.debug(f"Classified activity as {best.value} (score={best_score})")
        return best

    def primary_keyword(self, activity_text: str, category: Category | None = None) -> str | None:
        """First primary domain noun of ``category`` found in the text."""
        category = category or self.classify(activity_text)
        hits = matched_terms(activity_text or "", self._keywords[category].get("primary", ()))
        return hits[0] if hits else None
