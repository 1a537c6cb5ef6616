"""
Unit tests for the ActivityClassifier module.
"""

import pytest

from inquiry_interview.app.classifier import (
    CATEGORY_PRIORITY,
    FALLBACK_CATEGORY,
    MAX_CATEGORY_SCORE,
    ActivityClassifier,
)
from inquiry_interview.core.domain.models import Category


def _table(**primary_terms):
    """Keyword table with one primary term per category, 'zzz' by default."""
    return {
        category: {"primary": (primary_terms.get(category.name, "zzz"),)}
        for category in Category
    }


class TestActivityClassifier:
    """Test suite for ActivityClassifier class."""

    @pytest.fixture
    def classifier(self):
        return ActivityClassifier()

    # =========================================================================
    # Classification Tests
    # =========================================================================

    def test_sports_activity(self, classifier, sports_activity):
        assert classifier.classify(sports_activity) == Category.COMPETITIVE_SPORTS

    def test_scientific_activity(self, classifier):
        text = "I observed medaka fish and recorded the water temperature every morning."

        assert classifier.classify(text) == Category.INDIVIDUAL_SCIENTIFIC

    def test_leadership_activity(self, classifier):
        text = "As student council president I organized meetings to decide the school festival theme."

        assert classifier.classify(text) == Category.LEADERSHIP_CONSENSUS

    @pytest.mark.parametrize("text, expected", [
        ("I started playing tennis", Category.COMPETITIVE_SPORTS),
        ("I started coding", Category.TECHNICAL_CREATIVE),
        ("I wrote an article about my robot", Category.TECHNICAL_CREATIVE),
    ])
    def test_nouns_do_not_match_inside_longer_words(self, classifier, text, expected):
        """'star' must not hit 'started', nor 'art' hit 'article'."""
        assert classifier.classify(text) == expected

    def test_words_sharing_a_prefix_score_nothing(self, classifier):
        text = "I started in winter and made a single application"

        assert classifier.score(text, Category.INDIVIDUAL_SCIENTIFIC) == 0
        assert classifier.score(text, Category.COMPETITIVE_SPORTS) == 0
        assert classifier.score(text, Category.COLLABORATIVE_ARTISTIC) == 0
        assert classifier.score(text, Category.TECHNICAL_CREATIVE) == 0

    def test_stems_still_match_inflections(self, classifier):
        """'practic*' covers 'practiced' and 'practicing'."""
        assert classifier.score("practiced", Category.COMPETITIVE_SPORTS) == 3
        assert classifier.score("practicing", Category.COMPETITIVE_SPORTS) == 3

    def test_empty_text_falls_back(self, classifier):
        assert classifier.classify("") == FALLBACK_CATEGORY

    def test_unmatched_text_falls_back(self, classifier):
        assert classifier.classify("qwerty zxcv") == FALLBACK_CATEGORY

    def test_classification_is_deterministic(self, classifier, sports_activity):
        results = {classifier.classify(sports_activity) for _ in range(5)}

        assert len(results) == 1

    # =========================================================================
    # Scoring Tests
    # =========================================================================

    def test_score_is_capped(self, classifier, sports_activity):
        assert classifier.score(sports_activity, Category.COMPETITIVE_SPORTS) == MAX_CATEGORY_SCORE

    def test_scores_cover_every_category_in_priority_order(self, classifier, sports_activity):
        scores = classifier.scores(sports_activity)

        assert tuple(scores) == CATEGORY_PRIORITY
        assert all(0 <= s <= MAX_CATEGORY_SCORE for s in scores.values())

    def test_shared_term_scores_in_both_categories(self, classifier, sports_activity):
        """'record' is a method term for both sports and science."""
        assert classifier.score(sports_activity, Category.INDIVIDUAL_SCIENTIFIC) == 3

    def test_repeated_term_counts_once(self, classifier):
        once = classifier.score("soccer", Category.COMPETITIVE_SPORTS)
        twice = classifier.score("soccer soccer soccer", Category.COMPETITIVE_SPORTS)

        assert once == twice == 4

    # =========================================================================
    # Tie-break Tests
    # =========================================================================

    def test_tie_goes_to_first_category_in_priority(self):
        classifier = ActivityClassifier(
            keywords=_table(COLLABORATIVE_ARTISTIC="alpha", INDIVIDUAL_SCIENTIFIC="beta"),
        )

        assert classifier.classify("alpha beta") == Category.COLLABORATIVE_ARTISTIC

    def test_tie_follows_custom_priority(self):
        priority = tuple(reversed(CATEGORY_PRIORITY))
        classifier = ActivityClassifier(
            keywords=_table(COLLABORATIVE_ARTISTIC="alpha", INDIVIDUAL_SCIENTIFIC="beta"),
            priority=priority,
        )

        assert classifier.classify("alpha beta") == Category.INDIVIDUAL_SCIENTIFIC

    def test_custom_fallback(self):
        classifier = ActivityClassifier(fallback=Category.TECHNICAL_CREATIVE)

        assert classifier.classify("") == Category.TECHNICAL_CREATIVE

    def test_priority_must_list_every_category(self):
        with pytest.raises(ValueError):
            ActivityClassifier(priority=CATEGORY_PRIORITY[:-1])

    # =========================================================================
    # Keyword Tests
    # =========================================================================

    def test_primary_keyword(self, classifier, sports_activity):
        assert classifier.primary_keyword(sports_activity) == "soccer"

    def test_primary_keyword_missing(self, classifier):
        assert classifier.primary_keyword("I practice every day.", Category.COMPETITIVE_SPORTS) is None
