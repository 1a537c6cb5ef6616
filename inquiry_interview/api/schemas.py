"""
Inquiry Interview - API Request/Response Schemas.

Pydantic models for API validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from inquiry_interview.core.domain.models import Category, Phase


# =============================================================================
# Request Schemas
# =============================================================================

class TurnSchema(BaseModel):
    """One question/answer exchange of the transcript."""
    question_id: str = Field(..., min_length=1)
    response: str = ""


class ClassifyRequest(BaseModel):
    """Activity description to classify."""
    activity_text: str = Field(..., description="Candidate's description of their inquiry activity")


class AnalyzeRequest(BaseModel):
    """Single candidate response to analyze."""
    response: str = Field(..., description="Candidate's answer")


class TurnRequest(BaseModel):
    """
    Everything needed to decide the next question.

    The API is stateless: clients send the whole transcript and the phase,
    depth and category returned by the previous turn.
    """
    activity_text: str = Field(..., description="Candidate's description of their inquiry activity")
    transcript: list[TurnSchema] = Field(default_factory=list)
    phase: Phase = Phase.OPENING
    depth: int = Field(default=1, ge=1)
    category: Optional[Category] = None
    last_question_text: Optional[str] = Field(
        default=None,
        description="Wording of the question the latest response answered",
    )


# =============================================================================
# Response Schemas
# =============================================================================

class ClassifyResponse(BaseModel):
    """Chosen category with the score of every category."""
    category: Category
    scores: dict[str, int]
    keyword: Optional[str] = None


class FeaturesResponse(BaseModel):
    """Features derived from one response."""
    depth: str
    elements: list[str]
    emotions: list[str]
    difficulties: list[str]
    solutions: list[str]
    learnings: list[str]


class QuestionResponse(BaseModel):
    """A planned question and its final wording."""
    id: str
    intent: str
    evaluation_focus: str
    expected_depth: str
    preparation_seconds: Optional[int] = None
    text: str
    source: str


class TurnResponse(BaseModel):
    """Next question plus the state the client sends back next turn."""
    category: Category
    phase: Phase
    depth: int
    advanced_to: Optional[Phase] = None
    exhausted: bool = False
    follow_up_fired: bool = False
    not_serious: bool = False
    question: QuestionResponse
    features: FeaturesResponse
