"""
Inquiry Interview - API Routes.

FastAPI router with the interview endpoints. The API keeps no sessions:
every turn request carries the full transcript.
Includes rate limiting on the turn endpoint to prevent Gemini credit drain.
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from inquiry_interview.api.schemas import (
    AnalyzeRequest,
    ClassifyRequest,
    ClassifyResponse,
    FeaturesResponse,
    QuestionResponse,
    TurnRequest,
    TurnResponse,
)
from inquiry_interview.app.engine import InterviewEngine, create_engine, generic_probe
from inquiry_interview.app.guard import ResponseGuard
from inquiry_interview.app.renderer import QuestionRenderer, RenderedQuestion
from inquiry_interview.core.config import get_settings
from inquiry_interview.core.domain.models import (
    Category,
    QuestionSpec,
    ResponseFeatures,
    Turn,
    TurnInput,
)
from inquiry_interview.core.exceptions import InterviewAIError
from inquiry_interview.core.prompts import SERIOUS_REMINDER


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["interview"])

limiter = Limiter(key_func=get_remote_address)


# =============================================================================
# Dependencies
# =============================================================================

@lru_cache
def get_engine() -> InterviewEngine:
    """Shared engine; the catalog is loaded once per process."""
    return create_engine()


@lru_cache
def get_renderer() -> QuestionRenderer:
    return QuestionRenderer()


def get_guard() -> ResponseGuard:
    return ResponseGuard()


def _turn_limit() -> str:
    return get_settings().TURN_RATE_LIMIT


def _features_response(features: ResponseFeatures) -> FeaturesResponse:
    return FeaturesResponse(**features.to_dict())


def _question_response(question: QuestionSpec, rendered: RenderedQuestion) -> QuestionResponse:
    return QuestionResponse(
        id=question.id,
        intent=question.intent.value,
        evaluation_focus=question.evaluation_focus.value,
        expected_depth=question.expected_depth.value,
        preparation_seconds=question.preparation_seconds,
        text=rendered.text,
        source=rendered.source,
    )


# =============================================================================
# Classification & Analysis
# =============================================================================

@router.post("/classify", response_model=ClassifyResponse)
async def classify_activity(
    request: ClassifyRequest,
    engine: InterviewEngine = Depends(get_engine),
):
    """Pick the interviewing style for an activity description."""
    category = engine.classify(request.activity_text)
    scores = engine.classifier.scores(request.activity_text)

    return ClassifyResponse(
        category=category,
        scores={c.value: s for c, s in scores.items()},
        keyword=engine.keyword_for(request.activity_text, category),
    )


@router.post("/analyze", response_model=FeaturesResponse)
async def analyze_response(
    request: AnalyzeRequest,
    engine: InterviewEngine = Depends(get_engine),
):
    """Depth and tags of a single response."""
    return _features_response(engine.analyze(request.response))


# =============================================================================
# Interview Flow
# =============================================================================

@router.post("/turn", response_model=TurnResponse)
@limiter.limit(_turn_limit)
async def next_turn(
    request: Request,
    turn_request: TurnRequest,
    engine: InterviewEngine = Depends(get_engine),
    renderer: QuestionRenderer = Depends(get_renderer),
    guard: ResponseGuard = Depends(get_guard),
):
    """
    Decide and word the next question. Rate-limited to prevent LLM abuse.

    When the latest answer is not serious, the previous question is asked
    again behind a reminder and the session state is returned unchanged;
    clients should not keep the flagged turn in their transcript.
    """
    transcript = tuple(
        Turn(question_id=t.question_id, response=t.response)
        for t in turn_request.transcript
    )

    try:
        category = turn_request.category or engine.classify(turn_request.activity_text)

        if transcript and turn_request.last_question_text and guard.is_not_serious(
            turn_request.last_question_text, transcript[-1].response
        ):
            return _reminder_response(engine, turn_request, transcript, category)

        decision = engine.decide(TurnInput(
            activity_text=turn_request.activity_text,
            transcript=transcript,
            phase=turn_request.phase,
            depth=turn_request.depth,
            category=category,
        ))

        rendered = await renderer.render(
            decision.question,
            category=decision.category,
            phase=decision.phase,
            activity_text=turn_request.activity_text,
            latest_response=transcript[-1].response if transcript else "",
            depth=decision.depth,
            keyword=engine.keyword_for(turn_request.activity_text, decision.category),
        )
    except InterviewAIError as e:
        logger.error(f"Failed to decide turn: {e}")
        raise HTTPException(status_code=500, detail=e.message)

    return TurnResponse(
        category=decision.category,
        phase=decision.phase,
        depth=decision.depth,
        advanced_to=decision.advanced_to,
        exhausted=decision.exhausted,
        follow_up_fired=decision.follow_up_fired,
        question=_question_response(decision.question, rendered),
        features=_features_response(decision.features),
    )


def _reminder_response(
    engine: InterviewEngine,
    turn_request: TurnRequest,
    transcript: tuple[Turn, ...],
    category: Category,
) -> TurnResponse:
    """Repeat the previous question behind a polite reminder."""
    previous_id = transcript[-1].question_id
    found = engine.catalog.find_question(category, previous_id)
    question = found[1] if found else generic_probe(turn_request.phase)

    logger.info(f"🙅 Answer to {previous_id} not serious, repeating question")

    rendered = RenderedQuestion(
        question_id=question.id,
        text=SERIOUS_REMINDER.format(question=turn_request.last_question_text),
        source="reminder",
    )
    return TurnResponse(
        category=category,
        phase=turn_request.phase,
        depth=turn_request.depth,
        not_serious=True,
        question=_question_response(question, rendered),
        features=_features_response(engine.analyze(transcript[-1].response)),
    )


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health_check():
    """API health check."""
    return {"status": "healthy", "service": "Inquiry Interview"}
