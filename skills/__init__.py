from skills.code_skill import analyze_complexity, convert_code, debug_code, explain_code
from skills.study_skill import (
    generate_flashcards,
    generate_quiz,
    generate_schedule,
    suggest_tasks,
    summarize,
    summarize_all,
)
from skills.tutor_skill import chat_turn, regenerate_reply

__all__ = [
    "analyze_complexity",
    "chat_turn",
    "convert_code",
    "debug_code",
    "explain_code",
    "generate_flashcards",
    "generate_quiz",
    "generate_schedule",
    "regenerate_reply",
    "suggest_tasks",
    "summarize",
    "summarize_all",
]
