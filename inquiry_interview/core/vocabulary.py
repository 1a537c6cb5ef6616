"""
Inquiry Interview - Keyword Vocabulary.

Every keyword family used to read candidate text lives here, as data.
The response analyzer, the phase controller and the activity classifier
all match against these tables, so a family means the same thing at every
call site.

Matching rules:
- A term matches as a whole word or phrase ("car" does not match
  "career", "bus" does not match "busy").
- A trailing ``*`` marks a stem that matches at the start of a word
  ("struggl*" matches "struggled", "struggling").
- Everything is case-insensitive; spaces inside a term match any run of
  whitespace.
"""

import re
from functools import lru_cache
from typing import Iterable, Mapping

from inquiry_interview.core.domain.models import Category


STEM_MARK = "*"


# -----------------------------------------------------------------------------
# Depth Markers
# -----------------------------------------------------------------------------

SPECIFICITY_MARKERS: tuple[str, ...] = (
    "specifically",
    "for example",
    "for instance",
    "actually",
    "in detail",
    "in particular",
    "because",
)

EMOTION_MARKERS: tuple[str, ...] = (
    "happy",
    "fun",
    "troubled",
    "hard",
    "moved",
    "glad",
    "excited",
    "sad",
    "frustrated",
    "proud",
)


# -----------------------------------------------------------------------------
# Tag Families
# -----------------------------------------------------------------------------

ELEMENT_FAMILIES: dict[str, tuple[str, ...]] = {
    "trigger": ("start*", "began", "begin*", "first", "because", "got into", "inspired", "got interested"),
    "difficulty": ("difficult*", "hard", "struggl*", "problem*", "challeng*", "troubl*", "tough", "fail*",
                   "mistake*", "obstacle*"),
    "solution": ("solv*", "solution*", "figured out", "fixed", "tried", "improv*", "method*", "approach*", "way to"),
    "learning": ("learn*", "realiz*", "realis*", "understood", "understand*", "taught me"),
    "collaboration": ("friend*", "teacher*", "family", "families", "team*", "together", "classmate*", "partner*",
                      "everyone", "coach*", "group*", "parent*"),
    "continuity": ("continu*", "keep*", "kept", "more", "again", "next", "still", "every day", "every week"),
    "discovery": ("discover*", "found out", "notic*", "surpris*", "unexpected*", "turned out"),
    "process": ("step*", "process*", "then", "practic*", "record*", "measur*", "observ*", "experiment*",
                "research*", "plan", "plans", "planned", "planning", "test", "tests", "tested", "testing"),
    "activity": ("activity", "activities", "project*", "club*", "play", "plays", "played", "playing", "research*",
                 "study", "studies", "studied", "studying", "working on", "work on", "make", "makes", "making",
                 "build*"),
    "transport": ("train", "trains", "bus", "buses", "car", "cars", "bike", "bikes", "bicycle*", "walk", "walked",
                  "walking", "on foot", "subway", "drove", "rode", "taxi"),
    "time": ("minute*", "hour*", "took", "half an hour", "o'clock"),
    "self_change": ("changed", "grew", "confiden*", "became", "used to", "now i"),
    "connection": ("connect*", "relat*", "similar*", "apply", "applied", "other subject*", "daily life",
                   "school life", "in common"),
    "future": ("future", "want to", "plan to", "dream*", "career*", "someday", "next year", "high school", "hope to"),
}

EMOTION_FAMILIES: dict[str, tuple[str, ...]] = {
    "joy": ("happy", "fun", "enjoy*", "glad", "excit*", "interesting"),
    "struggle": ("troubl*", "hard", "tough", "frustrat*", "worr*", "upset"),
    "surprise": ("surpris*", "amaz*", "unexpected*", "shock*"),
    "satisfaction": ("satisf*", "proud", "accomplish*", "success*", "went well"),
}

DIFFICULTY_FAMILIES: dict[str, tuple[str, ...]] = {
    "disagreement": ("disagree*", "argu*", "conflict*", "different opinion*", "fight*"),
    "technical": ("technique*", "skill*", "couldn't", "could not", "can't", "cannot"),
    "time_management": ("no time", "not enough time", "busy", "deadline*", "in time", "schedule*"),
    "cost": ("money", "cost*", "expensive", "budget*"),
}

SOLUTION_FAMILIES: dict[str, tuple[str, ...]] = {
    "repetition": ("practic*", "repeat*", "again and again", "over and over", "many times"),
    "research": ("research*", "look up", "looked up", "search*", "information", "read about"),
    "support": ("ask*", "advice", "consult*", "taught", "help*"),
    "method": ("method*", "approach*", "idea*", "tried", "changed the way"),
}

LEARNING_FAMILIES: dict[str, tuple[str, ...]] = {
    "values": ("importan*", "matter*", "necessary", "valu*"),
    "growth": ("grow*", "grew", "improv*", "better at", "able to", "progress*"),
    "interest": ("interest*", "love*", "enjoy*", "like"),
    "social": ("friend*", "teammate*", "cooperat*", "together", "help each other"),
}

# Exploration may only be left once most of these have come up
CORE_EXPLORATION_ELEMENTS: tuple[str, ...] = ("difficulty", "continuity", "discovery", "process")


# -----------------------------------------------------------------------------
# Activity Categories
# -----------------------------------------------------------------------------

TIER_WEIGHTS: dict[str, int] = {
    "primary": 4,   # domain nouns
    "method": 3,    # method / process terms
    "social": 2,    # collaboration / social terms
    "affect": 1,    # affect / mindset terms
}

# Primary nouns are whole words only; the first one found names the activity
CATEGORY_KEYWORDS: dict[Category, dict[str, tuple[str, ...]]] = {
    Category.COLLABORATIVE_ARTISTIC: {
        "primary": ("dance", "dancing", "music", "theater", "theatre", "drama", "art", "arts", "painting",
                    "drawing", "choir", "singing", "song", "songs", "instrument", "piano", "violin", "band"),
        "method": ("rehears*", "perform*", "compos*", "choreograph*", "sketch*", "exhibit*", "concert*", "stage"),
        "social": ("together", "ensemble*", "audience*", "troupe*", "member*", "group*"),
        "affect": ("express*", "beaut*", "emotion*", "feel*"),
    },
    Category.INDIVIDUAL_SCIENTIFIC: {
        "primary": ("science", "experiment", "experiments", "insect", "insects", "plant", "plants", "fish",
                    "medaka", "animal", "animals", "fossil", "fossils", "weather", "bird", "birds", "star",
                    "stars", "mineral", "minerals", "chemistry", "biology", "physics"),
        "method": ("observ*", "record*", "measur*", "hypothes*", "data", "analy*", "compar*", "investigat*",
                   "research*"),
        "social": ("library", "museum*", "expert*", "professor*", "specialist*"),
        "affect": ("curious", "curiosity", "wonder", "wondered", "fascinat*", "myster*"),
    },
    Category.COMPETITIVE_SPORTS: {
        "primary": ("soccer", "baseball", "basketball", "tennis", "swimming", "volleyball", "judo", "karate",
                    "track and field", "marathon", "football", "badminton", "running"),
        "method": ("practic*", "train", "training", "drill*", "record*", "exercise*", "workout*", "every day"),
        "social": ("team*", "teammate*", "coach*", "captain*", "opponent*", "match", "matches"),
        "affect": ("win", "wins", "winning", "won", "lose", "losing", "lost", "compet*", "determin*",
                   "never give up"),
    },
    Category.SOCIAL_PROBLEM_SOLVING: {
        "primary": ("volunteer", "volunteering", "community", "environment", "recycling", "trash", "garbage",
                    "poverty", "elderly", "disaster", "pollution", "local"),
        "method": ("survey*", "interview*", "campaign*", "propos*", "clean*", "collect*", "petition*"),
        "social": ("neighbor*", "neighbour*", "resident*", "citizen*", "society", "city", "town"),
        "affect": ("help*", "care", "caring", "justice", "responsib*", "kind", "kindness"),
    },
    Category.TECHNICAL_CREATIVE: {
        "primary": ("programming", "program", "code", "coding", "robot", "robots", "robotics", "app", "apps",
                    "game", "games", "software", "computer", "electronics", "circuit", "3d printing", "website",
                    "invention"),
        "method": ("design*", "build*", "prototyp*", "debug*", "develop*", "test", "tests", "testing", "make",
                   "making"),
        "social": ("user*", "share*", "sharing", "online", "hackathon*", "forum*", "open source"),
        "affect": ("creativ*", "idea*", "imagin*", "excit*"),
    },
    Category.LEADERSHIP_CONSENSUS: {
        "primary": ("student council", "council", "committee", "president", "leader", "class representative",
                    "chairperson", "representative"),
        "method": ("organiz*", "organis*", "meeting*", "vote*", "voting", "discuss*", "decid*", "coordinat*",
                   "delegat*"),
        "social": ("opinion*", "consensus", "agree*", "everyone", "classmate*"),
        "affect": ("respect*", "trust*", "listen*", "patien*"),
    },
}


# -----------------------------------------------------------------------------
# Matching
# -----------------------------------------------------------------------------

def is_stem(term: str) -> bool:
    return term.endswith(STEM_MARK)


def bare_term(term: str) -> str:
    """Term as written in text, without the stem mark."""
    return term.rstrip(STEM_MARK)


def _term_pattern(term: str) -> str:
    pattern = r"\s+".join(re.escape(word) for word in bare_term(term).lower().split())
    return pattern if is_stem(term) else pattern + r"\b"


@lru_cache(maxsize=None)
def _terms_regex(terms: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(_term_pattern(t) for t in terms)
    return re.compile(rf"\b(?:{alternatives})", re.IGNORECASE)


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """True if any term occurs in ``text``."""
    terms = tuple(terms)
    if not text or not terms:
        return False
    return _terms_regex(terms).search(text) is not None


def matched_terms(text: str, terms: Iterable[str]) -> list[str]:
    """Terms (in table order, stem marks removed) that occur in ``text``."""
    if not text:
        return []
    return [bare_term(term) for term in terms if _terms_regex((term,)).search(text)]


def count_markers(text: str, markers: Iterable[str]) -> int:
    """Count occurrences of any marker, repeats included."""
    markers = tuple(markers)
    if not text or not markers:
        return 0
    return len(_terms_regex(markers).findall(text))


def match_families(text: str, families: Mapping[str, Iterable[str]]) -> tuple[str, ...]:
    """Names of the families with at least one term present, in table order."""
    return tuple(name for name, terms in families.items() if contains_any(text, terms))
