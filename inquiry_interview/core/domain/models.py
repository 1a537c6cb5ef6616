"""
Inquiry Interview - Domain Models.

Defines the core data structures used throughout the application.
Catalog and transcript types are frozen dataclasses: the catalog is static
configuration and a transcript is append-only, so neither is ever mutated
in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class Category(str, Enum):
    """Thematic interviewing styles chosen from the activity description."""
    COLLABORATIVE_ARTISTIC = "collaborative_artistic"
    INDIVIDUAL_SCIENTIFIC = "individual_scientific"
    COMPETITIVE_SPORTS = "competitive_sports"
    SOCIAL_PROBLEM_SOLVING = "social_problem_solving"
    TECHNICAL_CREATIVE = "technical_creative"
    LEADERSHIP_CONSENSUS = "leadership_consensus"


class Phase(str, Enum):
    """Interview phases, in the only order a session may visit them."""
    OPENING = "opening"
    EXPLORATION = "exploration"
    METACOGNITION = "metacognition"
    FUTURE = "future"

    @property
    def next(self) -> "Phase | None":
        """The phase that follows this one, or None for the terminal phase."""
        index = PHASE_ORDER.index(self)
        if index + 1 < len(PHASE_ORDER):
            return PHASE_ORDER[index + 1]
        return None

    @property
    def is_terminal(self) -> bool:
        return self.next is None


PHASE_ORDER: tuple[Phase, ...] = (
    Phase.OPENING,
    Phase.EXPLORATION,
    Phase.METACOGNITION,
    Phase.FUTURE,
)


class DepthTier(str, Enum):
    """Coarse estimate of how substantive a response is."""
    SURFACE = "surface"
    MODERATE = "moderate"
    DEEP = "deep"
    PROFOUND = "profound"

    @property
    def is_shallow(self) -> bool:
        return self in (DepthTier.SURFACE, DepthTier.MODERATE)


class QuestionIntent(str, Enum):
    """Conversational purpose of a question."""
    BASIC_CONFIRMATION = "basic_confirmation"
    TRIGGER_EXPLORATION = "trigger_exploration"
    DIFFICULTY_PROBING = "difficulty_probing"
    SOLUTION_PROCESS = "solution_process"
    COLLABORATION_DETAIL = "collaboration_detail"
    INFORMATION_GATHERING = "information_gathering"
    FAILURE_LEARNING = "failure_learning"
    METACOGNITIVE_CONNECTION = "metacognitive_connection"
    CONTINUATION_WILLINGNESS = "continuation_willingness"
    CREATION_DETAIL = "creation_detail"
    SELF_CHANGE = "self_change"


class EvaluationFocus(str, Enum):
    """Rubric dimensions a question is designed to surface (opaque labels)."""
    GENUINE_INTEREST = "genuine_interest"
    EXPERIENCE_BASED = "experience_based"
    SOCIAL_CONNECTION = "social_connection"
    INQUIRY_NATURE = "inquiry_nature"
    EMPATHY_COMMUNICATION = "empathy_communication"
    EMPATHY = "empathy"
    SELF_TRANSFORMATION = "self_transformation"
    ORIGINAL_EXPRESSION = "original_expression"


class Tone(str, Enum):
    """Style hint passed to the text generator."""
    FORMAL = "formal"
    FRIENDLY = "friendly"
    ENCOURAGING = "encouraging"


# -----------------------------------------------------------------------------
# Catalog Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FollowUpRule:
    """
    Jump to a specific question when the latest response mentions a term.

    ``condition`` is a ``|``-separated list of terms, matched the same way
    as the keyword families in :mod:`inquiry_interview.core.vocabulary`.
    """

    condition: str
    target_id: str
    depth_increment: int = 1

    @property
    def terms(self) -> tuple[str, ...]:
        return tuple(t.strip() for t in self.condition.split("|") if t.strip())


@dataclass(frozen=True)
class QuestionGuidance:
    """What the text generator needs to phrase a question. Never rendered here."""

    topic: str
    tone: Tone = Tone.FRIENDLY
    elements: tuple[str, ...] = ()
    context: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "tone": self.tone.value,
            "elements": list(self.elements),
            "context": self.context,
        }


@dataclass(frozen=True)
class QuestionSpec:
    """A structured description of what to ask and why."""

    id: str
    intent: QuestionIntent
    evaluation_focus: EvaluationFocus
    expected_depth: DepthTier
    guidance: QuestionGuidance
    follow_ups: tuple[FollowUpRule, ...] = ()
    preparation_seconds: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "intent": self.intent.value,
            "evaluation_focus": self.evaluation_focus.value,
            "expected_depth": self.expected_depth.value,
            "preparation_seconds": self.preparation_seconds,
            "guidance": self.guidance.to_dict(),
        }


@dataclass(frozen=True)
class PhaseExitCondition:
    """Evidence required before a phase may be left."""

    min_turns: int
    required_elements: tuple[str, ...] = ()
    evaluated_focus: tuple[EvaluationFocus, ...] = ()


@dataclass(frozen=True)
class PhaseEntry:
    """Ordered questions and exit condition for one (category, phase) pair."""

    questions: tuple[QuestionSpec, ...]
    exit_condition: PhaseExitCondition

    def find(self, question_id: str) -> QuestionSpec | None:
        """Look up a question of this phase by id."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


# -----------------------------------------------------------------------------
# Transcript & Analysis Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Turn:
    """Single question/answer exchange."""

    question_id: str
    response: str = ""

    @property
    def is_answered(self) -> bool:
        return bool(self.response and self.response.strip())


Transcript = tuple[Turn, ...]


@dataclass(frozen=True)
class ResponseFeatures:
    """Features derived from one response. Tags keep table order."""

    depth: DepthTier = DepthTier.SURFACE
    elements: tuple[str, ...] = ()
    emotions: tuple[str, ...] = ()
    difficulties: tuple[str, ...] = ()
    solutions: tuple[str, ...] = ()
    learnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "depth": self.depth.value,
            "elements": list(self.elements),
            "emotions": list(self.emotions),
            "difficulties": list(self.difficulties),
            "solutions": list(self.solutions),
            "learnings": list(self.learnings),
        }


@dataclass(frozen=True)
class Exhausted:
    """Signal that every question of a phase has already been asked."""

    phase: Phase | None = None


# -----------------------------------------------------------------------------
# Turn Decision Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TurnInput:
    """Everything the engine needs to decide one turn."""

    activity_text: str
    transcript: Transcript = ()
    phase: Phase = Phase.OPENING
    depth: int = 1
    category: Category | None = None


@dataclass(frozen=True)
class TurnDecision:
    """Outcome of one turn: the next question and the phase verdict."""

    category: Category
    phase: Phase
    question: QuestionSpec
    features: ResponseFeatures
    depth: int
    advanced_to: Phase | None = None
    exhausted: bool = False
    follow_up_fired: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "phase": self.phase.value,
            "advanced_to": self.advanced_to.value if self.advanced_to else None,
            "question": self.question.to_dict(),
            "features": self.features.to_dict(),
            "depth": self.depth,
            "exhausted": self.exhausted,
            "follow_up_fired": self.follow_up_fired,
        }
