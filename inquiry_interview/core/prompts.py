"""
Inquiry Interview - Prompts & Fallback Templates.

Prompt sent to the text-generation collaborator, plus the deterministic
wording used when the collaborator is unavailable.
"""

# -----------------------------------------------------------------------------
# Interviewer Persona
# -----------------------------------------------------------------------------

INTERVIEWER_PERSONA = """You are an interviewer at a school entrance interview talking with a twelve-year-old candidate about their inquiry activity.
Keep a dignified, kind tone. Ask exactly ONE question at a time."""


# -----------------------------------------------------------------------------
# Question Rendering Template
# -----------------------------------------------------------------------------

QUESTION_PROMPT = """{persona}

## Interview Stage
Phase: {phase}
Interview style: {category}
Depth layer: {depth}

## Question Plan
Purpose: {intent}
Topic: {topic}
Must cover: {elements}
Notes: {context}

## Candidate's Activity
{activity}

## Candidate's Latest Answer
"{latest_response}"

## Requirements
1. React naturally to the latest answer before asking, in a few words at most.
2. Reuse the candidate's own key words where it fits.
3. One or two sentences. End with a question mark.

Generate only the question, no preamble."""


STYLE_HINTS = {
    "formal": "Use polite, formal wording.",
    "friendly": "Use warm, relaxed wording that eases nerves.",
    "encouraging": "Use encouraging wording that invites a longer answer.",
}


# -----------------------------------------------------------------------------
# Fallback Questions (collaborator unavailable)
# -----------------------------------------------------------------------------

# Looked up by question id first, then by intent; {keyword} is the
# activity's main keyword or "your activity"
FALLBACK_BY_QUESTION = {
    "opening_1": "Let's begin the interview. Could you tell me your candidate number and your name?",
    "opening_2": "How did you get here today?",
    "opening_3": "About how long did it take you to get here?",
}

FALLBACK_BY_INTENT = {
    "basic_confirmation": "Could you tell me a little about yourself?",
    "information_gathering": "Now let's move to the main topic. Please tell me about {keyword} in about one minute. Would you like a moment to prepare?",
    "trigger_exploration": "What got you started with {keyword}?",
    "solution_process": "How do you actually go about {keyword}? Please walk me through the steps.",
    "difficulty_probing": "What was the hardest part of {keyword}, and how did you deal with it?",
    "collaboration_detail": "Who else was involved in {keyword}, and what was your role?",
    "failure_learning": "Was there a time when {keyword} did not go well? What did you learn from it?",
    "metacognitive_connection": "Looking back on {keyword}, what did you notice that you had not expected?",
    "continuation_willingness": "Would you like to keep going with {keyword}? What would you try next?",
    "creation_detail": "Could you describe what you made in more detail?",
    "self_change": "How do you think {keyword} has changed you?",
}


# -----------------------------------------------------------------------------
# Generic Probes (phase questions exhausted)
# -----------------------------------------------------------------------------

# Keyed by the probe question id, "<phase>_probe"
GENERIC_PROBES = {
    "opening_probe": "Could you tell me a little more about that?",
    "exploration_probe": "Could you tell me more about {keyword}, with a specific example?",
    "metacognition_probe": "Looking back on that, what else did you notice about yourself?",
    "future_probe": "Is there anything else you would like to tell me about what comes next?",
}


# -----------------------------------------------------------------------------
# Seriousness Reminder
# -----------------------------------------------------------------------------

SERIOUS_REMINDER = "Excuse me, this is an interview, so please answer seriously. Let me ask again: {question}"
