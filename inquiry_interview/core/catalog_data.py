"""
Inquiry Interview - Bundled Question Catalog.

Plain data in the same shape as a JSON catalog file:

    {category: {phase: {"questions": [...], "exit_condition": {...}}}}

Opening, metacognition and future phases are shared by every category.
Exploration follows one six-question arc (overview, trigger, process,
difficulty, collaboration, failure) whose wording is specialised per
category by EXPLORATION_TOPICS.
"""

from typing import Any


# -----------------------------------------------------------------------------
# Opening
# -----------------------------------------------------------------------------

OPENING: dict[str, Any] = {
    "questions": [
        {
            "id": "opening_1",
            "intent": "basic_confirmation",
            "evaluation_focus": "original_expression",
            "expected_depth": "surface",
            "guidance": {
                "topic": "Start of the interview and identity check",
                "tone": "formal",
                "elements": ["opening greeting", "candidate number", "name"],
                "context": "Announce the start of the interview and confirm who the candidate is.",
            },
        },
        {
            "id": "opening_2",
            "intent": "basic_confirmation",
            "evaluation_focus": "original_expression",
            "expected_depth": "surface",
            "follow_ups": [
                {
                    "condition": "train|trains|bus|buses|car|cars|bike|bikes|bicycle*|walk|walked|walking|on foot|subway|taxi",
                    "target_id": "opening_3",
                    "depth_increment": 1,
                },
            ],
            "guidance": {
                "topic": "How the candidate travelled here",
                "tone": "friendly",
                "elements": ["ask about means of transport"],
                "context": "Ease the nerves. Acknowledge the previous answer naturally before asking.",
            },
        },
        {
            "id": "opening_3",
            "intent": "basic_confirmation",
            "evaluation_focus": "original_expression",
            "expected_depth": "surface",
            "guidance": {
                "topic": "How long the journey took",
                "tone": "friendly",
                "elements": ["ask about travel time", "stay consistent with the previous answer"],
                "context": "If the previous answer already mentioned the time, do not ask again; acknowledge it and move on.",
            },
        },
    ],
    "exit_condition": {
        "min_turns": 3,
        "required_elements": ["transport", "time"],
        "evaluated_focus": ["original_expression"],
    },
}


# -----------------------------------------------------------------------------
# Exploration
# -----------------------------------------------------------------------------

EXPLORATION_TOPICS: dict[str, dict[str, str]] = {
    "collaborative_artistic": {
        "prefix": "art",
        "label": "artistic activity",
        "process": "How rehearsals and creative work are organised",
        "difficulty": "Disagreements about expression within the group",
        "collaboration": "The candidate's role within the ensemble",
    },
    "individual_scientific": {
        "prefix": "science",
        "label": "research or observation",
        "process": "How observations and records are kept",
        "difficulty": "Experiments that did not go as expected",
        "collaboration": "Who helped: family, teachers or experts",
    },
    "competitive_sports": {
        "prefix": "sports",
        "label": "sport",
        "process": "How practice is planned and records are tracked",
        "difficulty": "Slumps, losses and plateaus",
        "collaboration": "The candidate's role within the team",
    },
    "social_problem_solving": {
        "prefix": "social",
        "label": "community activity",
        "process": "How the problem was investigated in the community",
        "difficulty": "Obstacles when involving other people",
        "collaboration": "Working with residents and other volunteers",
    },
    "technical_creative": {
        "prefix": "tech",
        "label": "making or building project",
        "process": "How the thing was designed, built and tested",
        "difficulty": "Bugs and parts that would not work",
        "collaboration": "Sharing the work and getting feedback from others",
    },
    "leadership_consensus": {
        "prefix": "lead",
        "label": "leadership role",
        "process": "How the group reaches a decision",
        "difficulty": "Conflicting opinions within the group",
        "collaboration": "Building agreement with the members",
    },
}


def _exploration(topics: dict[str, str]) -> dict[str, Any]:
    """Exploration phase for one category, built on the shared six-question arc."""
    prefix = topics["prefix"]
    label = topics["label"]

    def qid(n: int) -> str:
        return f"{prefix}_{n}"

    return {
        "questions": [
            {
                "id": qid(1),
                "intent": "information_gathering",
                "evaluation_focus": "genuine_interest",
                "expected_depth": "deep",
                "preparation_seconds": 60,
                "follow_ups": [
                    {"condition": "hard|difficult*|struggl*|problem*|fail*", "target_id": qid(4), "depth_increment": 1},
                ],
                "guidance": {
                    "topic": f"Overview of the candidate's {label}",
                    "tone": "encouraging",
                    "elements": ["about one minute", "what the activity is", "offer preparation time"],
                    "context": "Move to the main topic. Decide from the mood whether to offer preparation time.",
                },
            },
            {
                "id": qid(2),
                "intent": "trigger_exploration",
                "evaluation_focus": "genuine_interest",
                "expected_depth": "moderate",
                "follow_ups": [
                    {"condition": "friend*|family|parent*|teacher*|coach*|tv|book*|video*", "target_id": qid(5), "depth_increment": 1},
                ],
                "guidance": {
                    "topic": f"What got the candidate started with the {label}",
                    "tone": "encouraging",
                    "elements": ["trigger", "beginning", "first encounter"],
                    "context": "Build on the overview and dig into the concrete moment it all began.",
                },
            },
            {
                "id": qid(3),
                "intent": "solution_process",
                "evaluation_focus": "experience_based",
                "expected_depth": "deep",
                "follow_ups": [
                    {"condition": "mistake*|fail*|went wrong|didn't work|did not work", "target_id": qid(6), "depth_increment": 2},
                ],
                "guidance": {
                    "topic": topics["process"],
                    "tone": "friendly",
                    "elements": ["concrete steps", "what is repeated", "how progress is checked"],
                    "context": "Ask for specific procedures rather than general statements.",
                },
            },
            {
                "id": qid(4),
                "intent": "difficulty_probing",
                "evaluation_focus": "inquiry_nature",
                "expected_depth": "deep",
                "follow_ups": [
                    {"condition": "together|team*|friend*|ask*|help*", "target_id": qid(5), "depth_increment": 1},
                ],
                "guidance": {
                    "topic": topics["difficulty"],
                    "tone": "encouraging",
                    "elements": ["hardest moment", "why it was hard", "how it was handled"],
                    "context": "Reuse the candidate's own words for the difficulty. Stay warm, there is no right answer.",
                },
            },
            {
                "id": qid(5),
                "intent": "collaboration_detail",
                "evaluation_focus": "empathy_communication",
                "expected_depth": "moderate",
                "guidance": {
                    "topic": topics["collaboration"],
                    "tone": "friendly",
                    "elements": ["who was involved", "own role", "a memorable exchange"],
                    "context": "",
                },
            },
            {
                "id": qid(6),
                "intent": "failure_learning",
                "evaluation_focus": "self_transformation",
                "expected_depth": "profound",
                "guidance": {
                    "topic": "What a failure taught the candidate",
                    "tone": "encouraging",
                    "elements": ["a failure", "what was noticed", "what changed afterwards"],
                    "context": "Invite reflection; the candidate should find the lesson in their own words.",
                },
            },
        ],
        "exit_condition": {
            "min_turns": 7,
            "required_elements": ["activity", "trigger", "difficulty", "solution", "learning"],
            "evaluated_focus": ["genuine_interest", "experience_based"],
        },
    }


# -----------------------------------------------------------------------------
# Metacognition
# -----------------------------------------------------------------------------

METACOGNITION: dict[str, Any] = {
    "questions": [
        {
            "id": "meta_1",
            "intent": "metacognitive_connection",
            "evaluation_focus": "inquiry_nature",
            "expected_depth": "deep",
            "follow_ups": [
                {"condition": "school|class*|subject*|daily life|other*", "target_id": "meta_2", "depth_increment": 1},
            ],
            "guidance": {
                "topic": "Discoveries the candidate did not expect",
                "tone": "friendly",
                "elements": ["unexpected discovery", "why it was surprising"],
                "context": "Shift from what happened to what the candidate noticed about it.",
            },
        },
        {
            "id": "meta_2",
            "intent": "metacognitive_connection",
            "evaluation_focus": "social_connection",
            "expected_depth": "deep",
            "guidance": {
                "topic": "Links between the activity and school or daily life",
                "tone": "friendly",
                "elements": ["another subject or situation", "what carries over"],
                "context": "",
            },
        },
        {
            "id": "meta_3",
            "intent": "self_change",
            "evaluation_focus": "self_transformation",
            "expected_depth": "profound",
            "guidance": {
                "topic": "How the candidate changed through the activity",
                "tone": "encouraging",
                "elements": ["before and after", "a concrete example of the change"],
                "context": "Ask for a specific moment where the change showed.",
            },
        },
        {
            "id": "meta_4",
            "intent": "metacognitive_connection",
            "evaluation_focus": "empathy_communication",
            "expected_depth": "moderate",
            "guidance": {
                "topic": "Explaining the activity to someone who has never tried it",
                "tone": "friendly",
                "elements": ["plain words", "what makes it interesting"],
                "context": "",
            },
        },
    ],
    "exit_condition": {
        "min_turns": 10,
        "required_elements": ["learning", "connection", "self_change"],
        "evaluated_focus": ["inquiry_nature", "self_transformation"],
    },
}


# -----------------------------------------------------------------------------
# Future
# -----------------------------------------------------------------------------

FUTURE: dict[str, Any] = {
    "questions": [
        {
            "id": "future_1",
            "intent": "continuation_willingness",
            "evaluation_focus": "genuine_interest",
            "expected_depth": "deep",
            "follow_ups": [
                {"condition": "yes|continu*|keep*|more", "target_id": "future_2", "depth_increment": 1},
            ],
            "guidance": {
                "topic": "Whether the candidate wants to keep going",
                "tone": "friendly",
                "elements": ["willingness to continue"],
                "context": "",
            },
        },
        {
            "id": "future_2",
            "intent": "continuation_willingness",
            "evaluation_focus": "inquiry_nature",
            "expected_depth": "deep",
            "guidance": {
                "topic": "What the candidate wants to try next",
                "tone": "encouraging",
                "elements": ["next challenge", "why that one"],
                "context": "",
            },
        },
        {
            "id": "future_3",
            "intent": "self_change",
            "evaluation_focus": "social_connection",
            "expected_depth": "deep",
            "guidance": {
                "topic": "Using the experience in the years ahead",
                "tone": "formal",
                "elements": ["school life ahead", "contribution to others"],
                "context": "Close the interview on a forward-looking note.",
            },
        },
    ],
    "exit_condition": {
        "min_turns": 12,
        "required_elements": ["future", "continuity"],
        "evaluated_focus": ["genuine_interest", "social_connection"],
    },
}


DEFAULT_CATALOG: dict[str, dict[str, Any]] = {
    category: {
        "opening": OPENING,
        "exploration": _exploration(topics),
        "metacognition": METACOGNITION,
        "future": FUTURE,
    }
    for category, topics in EXPLORATION_TOPICS.items()
}
