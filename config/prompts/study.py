"""Study material prompts — summaries, quizzes, flashcards, planner.

Every template is split around the payload: the builder emits
``prefix + payload + suffix``.  Structured tasks close with a fixed
output-contract directive describing the JSON array the normalizer expects.
"""

from __future__ import annotations

SUMMARY_INSTRUCTIONS: dict[str, str] = {
    "short": "Provide a concise summary (2-3 paragraphs) of the following text:",
    "long": "Provide a detailed, comprehensive summary of the following text:",
    "bullets": (
        "Summarize the following text in bullet points, "
        "highlighting key concepts and main ideas:"
    ),
}


def build_summary_prefix(mode: str) -> str:
    return f"You are an expert educational assistant. {SUMMARY_INSTRUCTIONS[mode]}\n\n"


# ── Output contracts ─────────────────────────────────────────

QUIZ_OUTPUT_CONTRACT = """\
Return ONLY a valid JSON array with this EXACT structure (no markdown code blocks, no extra text):
[
  {
    "question": "What is the main topic?",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correctAnswer": "Option A",
    "explanation": "Brief explanation of why this is correct"
  }
]

IMPORTANT:
- Return ONLY the JSON array, nothing else
- Each question must have exactly 4 options
- correctAnswer must be one of the options
- Make questions relevant to the text content"""

FLASHCARD_OUTPUT_CONTRACT = """\
Return ONLY a valid JSON array with this EXACT structure (no markdown code blocks, no extra text):
[
  {
    "front": "Question or key term",
    "back": "Answer or detailed definition"
  }
]

IMPORTANT:
- Return ONLY the JSON array, nothing else
- Front should be concise (question or term)
- Back should be detailed but clear
- Focus on the most important concepts"""

SCHEDULE_OUTPUT_CONTRACT = """\
Return ONLY a valid JSON array (no markdown code blocks, no extra text) with schedule items in this format:
[
  {
    "time": "09:00 AM",
    "duration": 60,
    "subject": "Subject name",
    "activity": "Activity description"
  }
]

IMPORTANT:
- Return ONLY the JSON array, nothing else
- duration is a whole number of minutes"""

TASKS_OUTPUT_CONTRACT = """\
Return ONLY a valid JSON array (no markdown code blocks, no extra text):
[
  {
    "title": "Task title",
    "description": "Task description",
    "priority": "low|medium|high",
    "estimatedTime": 30
  }
]

IMPORTANT:
- Return ONLY the JSON array, nothing else
- estimatedTime is a whole number of minutes"""


# ── Structured templates ─────────────────────────────────────


def build_quiz_prefix(count: int, difficulty: str) -> str:
    return (
        f"You are an expert quiz creator. Generate {count} {difficulty} difficulty "
        "multiple-choice quiz questions based on the provided text.\n\n"
        f"{QUIZ_OUTPUT_CONTRACT}\n\n"
        "Text to analyze:\n"
    )


def build_flashcard_prefix(count: int) -> str:
    return (
        f"Create {count} educational flashcards from the given text. "
        "Each flashcard should help students learn key concepts.\n\n"
        f"{FLASHCARD_OUTPUT_CONTRACT}\n\n"
        "Text:\n"
    )


SCHEDULE_PREFIX = "Create a daily study schedule for these subjects: "


def build_schedule_suffix(preferences: str | None) -> str:
    prefs = f"\n\nPreferences: {preferences}" if preferences else ""
    return f"{prefs}\n\n{SCHEDULE_OUTPUT_CONTRACT}"


TASKS_PREFIX = "Suggest 5 study tasks for "


def build_tasks_suffix(level: str) -> str:
    return f" at {level} level.\n\n{TASKS_OUTPUT_CONTRACT}"
