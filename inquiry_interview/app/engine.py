"""
Inquiry Interview - Interview Engine.

Coordinates the decision core for one turn:
- ActivityClassifier picks the interviewing style
- ResponseAnalyzer reads the latest answer
- PhaseController checks the current phase's exit condition
- QuestionSelector picks the next question of the (possibly new) phase

Turn Flow:
classify -> analyze latest answer -> phase verdict -> select -> TurnDecision

The engine keeps no session state. Callers pass the whole transcript and
the current phase/depth every turn and store what comes back.
"""

import logging

from inquiry_interview.app.analyzer import ResponseAnalyzer
from inquiry_interview.app.catalog import QuestionCatalog, load_catalog
from inquiry_interview.app.classifier import ActivityClassifier
from inquiry_interview.app.phases import PhaseController
from inquiry_interview.app.selector import QuestionSelector
from inquiry_interview.core.domain.models import (
    Category,
    DepthTier,
    EvaluationFocus,
    Exhausted,
    Phase,
    QuestionGuidance,
    QuestionIntent,
    QuestionSpec,
    ResponseFeatures,
    TurnDecision,
    TurnInput,
)


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Generic Probes
# -----------------------------------------------------------------------------

_PROBE_PLAN = {
    Phase.OPENING: (QuestionIntent.BASIC_CONFIRMATION, EvaluationFocus.ORIGINAL_EXPRESSION),
    Phase.EXPLORATION: (QuestionIntent.INFORMATION_GATHERING, EvaluationFocus.EXPERIENCE_BASED),
    Phase.METACOGNITION: (QuestionIntent.METACOGNITIVE_CONNECTION, EvaluationFocus.INQUIRY_NATURE),
    Phase.FUTURE: (QuestionIntent.CONTINUATION_WILLINGNESS, EvaluationFocus.GENUINE_INTEREST),
}


def generic_probe(phase: Phase) -> QuestionSpec:
    """Open follow-up asked once every catalog question of a phase is used."""
    intent, focus = _PROBE_PLAN[phase]
    return QuestionSpec(
        id=f"{phase.value}_probe",
        intent=intent,
        evaluation_focus=focus,
        expected_depth=DepthTier.MODERATE,
        guidance=QuestionGuidance(
            topic="Ask for more detail on the latest answer",
            context="Every planned question of this phase has been asked",
        ),
    )


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------

class InterviewEngine:
    """
    Decides the next question of an interview, one turn at a time.

    Usage:
        engine = InterviewEngine()

        decision = engine.decide(TurnInput(activity_text=activity))
        ...  # ask decision.question, record the answer

        decision = engine.decide(TurnInput(
            activity_text=activity,
            transcript=transcript,
            phase=decision.phase,
            depth=decision.depth,
            category=decision.category,
        ))
    """

    def __init__(
        self,
        classifier: ActivityClassifier | None = None,
        catalog: QuestionCatalog | None = None,
        selector: QuestionSelector | None = None,
        controller: PhaseController | None = None,
        analyzer: ResponseAnalyzer | None = None,
    ):
        """
        Initialize the engine with its collaborators.

        Args:
            classifier: Activity classifier (default keyword tables if not provided)
            catalog: Question catalog (loaded from settings if not provided)
            selector: Next-question policy
            controller: Phase state machine
            analyzer: Response analyzer shared with the controller
        """
        self._analyzer = analyzer or ResponseAnalyzer()
        self._classifier = classifier or ActivityClassifier()
        self._catalog = catalog if catalog is not None else load_catalog()
        self._selector = selector or QuestionSelector()
        self._controller = controller or PhaseController(analyzer=self._analyzer)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def catalog(self) -> QuestionCatalog:
        return self._catalog

    @property
    def classifier(self) -> ActivityClassifier:
        return self._classifier

    @property
    def analyzer(self) -> ResponseAnalyzer:
        return self._analyzer

    # -------------------------------------------------------------------------
    # Turn Decisions
    # -------------------------------------------------------------------------

    def classify(self, activity_text: str) -> Category:
        """Pick the interviewing style for an activity description."""
        return self._classifier.classify(activity_text)

    def analyze(self, response: str) -> ResponseFeatures:
        return self._analyzer.analyze(response)

    def keyword_for(self, activity_text: str, category: Category) -> str | None:
        """Main keyword of the activity, used to word fallback questions."""
        return self._classifier.primary_keyword(activity_text, category)

    def decide(self, turn: TurnInput) -> TurnDecision:
        """
        Decide the next question.

        Args:
            turn: Activity text, transcript so far, current phase and depth,
                and the category if one was already chosen

        Returns:
            TurnDecision with the next question and the phase it belongs to
        """
        category = turn.category or self.classify(turn.activity_text)
        transcript = tuple(turn.transcript)

        latest_response = transcript[-1].response if transcript else ""
        features = self.analyze(latest_response)

        # Phase verdict runs before selection so the question comes from
        # the phase the session is actually in
        advanced_to = None
        if transcript:
            advanced_to = self._controller.maybe_advance(
                turn.phase,
                transcript,
                self._catalog.exit_condition(category, turn.phase),
            )
        phase = advanced_to or turn.phase

        questions = self._catalog.questions(category, phase)
        rule = None if advanced_to else self._selector.follow_up_for(questions, transcript)

        if advanced_to:
            depth = 1
        elif rule is not None:
            depth = turn.depth + rule.depth_increment
        else:
            depth = turn.depth

        result = self._selector.select(questions, transcript, features, phase=phase)
        exhausted = isinstance(result, Exhausted)
        question = generic_probe(phase) if exhausted else result

        if exhausted:
            logger.info(f"🔁 {phase.value} questions exhausted, probing")
        else:
            logger.info(f"📝 Next question: {question.id} ({category.value}/{phase.value})")

        return TurnDecision(
            category=category,
            phase=phase,
            question=question,
            features=features,
            depth=depth,
            advanced_to=advanced_to,
            exhausted=exhausted,
            follow_up_fired=rule is not None,
        )


# -----------------------------------------------------------------------------
# Factory Function
# -----------------------------------------------------------------------------

def create_engine() -> InterviewEngine:
    """Create an engine with the default tables and the configured catalog."""
    analyzer = ResponseAnalyzer()
    return InterviewEngine(
        classifier=ActivityClassifier(),
        catalog=load_catalog(),
        selector=QuestionSelector(),
        controller=PhaseController(analyzer=analyzer),
        analyzer=analyzer,
    )
