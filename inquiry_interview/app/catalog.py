"""
Inquiry Interview - Question Catalog.

Static table of (category, phase) -> ordered questions + exit condition.

The table is data: it is validated with pydantic on load and converted
into frozen domain objects, so nothing can change it while sessions run.
The bundled catalog lives in :mod:`inquiry_interview.core.catalog_data`;
a JSON file of the same shape can replace it (CATALOG_PATH) or be loaded
directly in tests.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, Field, RootModel, ValidationError, model_validator

from inquiry_interview.core.catalog_data import DEFAULT_CATALOG
from inquiry_interview.core.config import get_settings
from inquiry_interview.core.domain.models import (
    Category,
    DepthTier,
    EvaluationFocus,
    FollowUpRule,
    Phase,
    PhaseEntry,
    PhaseExitCondition,
    QuestionGuidance,
    QuestionIntent,
    QuestionSpec,
    Tone,
)
from inquiry_interview.core.exceptions import CatalogError
from inquiry_interview.core.vocabulary import ELEMENT_FAMILIES


logger = logging.getLogger(__name__)


# =============================================================================
# Catalog Schemas
# =============================================================================

class FollowUpSchema(BaseModel):
    condition: str = Field(..., min_length=1)
    target_id: str
    depth_increment: int = Field(default=1, ge=0)


class GuidanceSchema(BaseModel):
    topic: str
    tone: Tone = Tone.FRIENDLY
    elements: list[str] = Field(default_factory=list)
    context: str = ""


class QuestionSchema(BaseModel):
    id: str = Field(..., min_length=1)
    intent: QuestionIntent
    evaluation_focus: EvaluationFocus
    expected_depth: DepthTier
    guidance: GuidanceSchema
    follow_ups: list[FollowUpSchema] = Field(default_factory=list)
    preparation_seconds: int | None = Field(default=None, ge=0)


class ExitConditionSchema(BaseModel):
    min_turns: int = Field(..., ge=0)
    required_elements: list[str] = Field(default_factory=list)
    evaluated_focus: list[EvaluationFocus] = Field(default_factory=list)

    @model_validator(mode="after")
    def _known_elements(self) -> "ExitConditionSchema":
        unknown = [e for e in self.required_elements if e not in ELEMENT_FAMILIES]
        if unknown:
            raise ValueError(f"Unknown required elements: {', '.join(unknown)}")
        return self


class PhaseEntrySchema(BaseModel):
    questions: list[QuestionSchema]
    exit_condition: ExitConditionSchema

    @model_validator(mode="after")
    def _consistent_ids(self) -> "PhaseEntrySchema":
        ids = [q.id for q in self.questions]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate question ids: {', '.join(duplicates)}")

        for question in self.questions:
            for rule in question.follow_ups:
                if rule.target_id not in ids:
                    raise ValueError(
                        f"Follow-up of {question.id} targets {rule.target_id}, "
                        f"which is not in the same phase"
                    )
        return self


class CatalogSchema(RootModel[dict[Category, dict[Phase, PhaseEntrySchema]]]):
    pass


# =============================================================================
# Catalog
# =============================================================================

class QuestionCatalog:
    """
    Read-only lookup of phase entries by (category, phase).

    Usage:
        catalog = QuestionCatalog.from_dict(DEFAULT_CATALOG)
        catalog.questions(Category.COMPETITIVE_SPORTS, Phase.EXPLORATION)
        catalog.exit_condition(Category.COMPETITIVE_SPORTS, Phase.OPENING)
    """

    def __init__(self, entries: Mapping[tuple[Category, Phase], PhaseEntry]):
        self._entries = MappingProxyType(dict(entries))

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], require_complete: bool = True) -> "QuestionCatalog":
        """
        Build a catalog from plain data.

        Args:
            data: {category: {phase: {"questions": [...], "exit_condition": {...}}}}
            require_complete: Reject catalogs missing any (category, phase) pair

        Raises:
            CatalogError: If the data does not validate
        """
        try:
            parsed = CatalogSchema.model_validate(data).root
        except ValidationError as e:
            raise CatalogError("Invalid question catalog", details=str(e)) from e

        entries = {
            (category, phase): _to_entry(schema)
            for category, phases in parsed.items()
            for phase, schema in phases.items()
        }

        if require_complete:
            missing = [
                f"{c.value}/{p.value}"
                for c in Category
                for p in Phase
                if (c, p) not in entries
            ]
            if missing:
                raise CatalogError("Incomplete question catalog", details=f"missing {', '.join(missing)}")

        return cls(entries)

    @classmethod
    def from_json(cls, path: str | Path, require_complete: bool = True) -> "QuestionCatalog":
        """Load a catalog from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file is not valid JSON: {path}", details=str(e)) from e

        logger.info(f"📚 Loaded question catalog from {path}")
        return cls.from_dict(data, require_complete=require_complete)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def entry(self, category: Category, phase: Phase) -> PhaseEntry:
        """
        Get the entry for a (category, phase) pair.

        Raises:
            CatalogError: If the pair is not in the catalog
        """
        try:
            return self._entries[(Category(category), Phase(phase))]
        except (KeyError, ValueError) as e:
            raise CatalogError(
                "No catalog entry",
                details=f"category={getattr(category, 'value', category)}, phase={getattr(phase, 'value', phase)}",
            ) from e

    def questions(self, category: Category, phase: Phase) -> tuple[QuestionSpec, ...]:
        return self.entry(category, phase).questions

    def exit_condition(self, category: Category, phase: Phase) -> PhaseExitCondition:
        return self.entry(category, phase).exit_condition

    def find_question(self, category: Category, question_id: str) -> tuple[Phase, QuestionSpec] | None:
        """Locate a question id anywhere in a category's phases."""
        for phase in Phase:
            entry = self._entries.get((category, phase))
            if entry is None:
                continue
            question = entry.find(question_id)
            if question is not None:
                return phase, question
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _to_entry(schema: PhaseEntrySchema) -> PhaseEntry:
    questions = tuple(
        QuestionSpec(
            id=q.id,
            intent=q.intent,
            evaluation_focus=q.evaluation_focus,
            expected_depth=q.expected_depth,
            guidance=QuestionGuidance(
                topic=q.guidance.topic,
                tone=q.guidance.tone,
                elements=tuple(q.guidance.elements),
                context=q.guidance.context,
            ),
            follow_ups=tuple(
                FollowUpRule(
                    condition=r.condition,
                    target_id=r.target_id,
                    depth_increment=r.depth_increment,
                )
                for r in q.follow_ups
            ),
            preparation_seconds=q.preparation_seconds,
        )
        for q in schema.questions
    )
    exit_condition = PhaseExitCondition(
        min_turns=schema.exit_condition.min_turns,
        required_elements=tuple(schema.exit_condition.required_elements),
        evaluated_focus=tuple(schema.exit_condition.evaluated_focus),
    )
    return PhaseEntry(questions=questions, exit_condition=exit_condition)


def load_catalog(path: str | Path | None = None) -> QuestionCatalog:
    """
    Load the catalog from ``path``, CATALOG_PATH, or the bundled data.

    Returns:
        A validated, complete QuestionCatalog
    """
    path = path or get_settings().CATALOG_PATH
    if path:
        return QuestionCatalog.from_json(path)
    return QuestionCatalog.from_dict(DEFAULT_CATALOG)
