"""Coding assistant prompts — explain, debug, convert, complexity.

The student's code is the payload and sits inside a fenced block tagged
with the source language.
"""

from __future__ import annotations


def _fence_open(language: str) -> str:
    return f"\n\n```{language}\n"


_FENCE_CLOSE = "\n```\n\n"


def explain_template(language: str) -> tuple[str, str]:
    prefix = (
        f"You are an expert programming tutor. Explain the following {language} "
        f"code clearly and concisely:{_fence_open(language)}"
    )
    suffix = (
        f"{_FENCE_CLOSE}Provide:\n"
        "1. **What it does**: Overall purpose\n"
        "2. **How it works**: Step-by-step explanation\n"
        "3. **Key concepts**: Important programming concepts used"
    )
    return prefix, suffix


def debug_template(language: str, error: str | None = None) -> tuple[str, str]:
    reported = f" that produces this error: {error}" if error else ""
    prefix = (
        f"You are an expert debugging assistant. Debug this {language} "
        f"code{reported}:{_fence_open(language)}"
    )
    suffix = (
        f"{_FENCE_CLOSE}Provide:\n"
        "1. **Issues Found**: List all bugs, errors, or potential problems\n"
        "2. **Fixed Code**: Corrected version with fixes\n"
        "3. **Explanation**: Why each fix was necessary"
    )
    return prefix, suffix


def convert_template(from_language: str, to_language: str) -> tuple[str, str]:
    prefix = f"Convert this {from_language} code to {to_language}:{_fence_open(from_language)}"
    suffix = (
        f"{_FENCE_CLOSE}Provide:\n"
        f"1. **Converted Code**: Complete {to_language} version\n"
        "2. **Key Differences**: Syntax and feature differences between languages\n"
        "3. **Notes**: Any important considerations"
    )
    return prefix, suffix


def complexity_template(language: str) -> tuple[str, str]:
    prefix = (
        "You are an expert in algorithm analysis. Analyze the time and space "
        f"complexity of this {language} code:{_fence_open(language)}"
    )
    suffix = (
        f"{_FENCE_CLOSE}Provide:\n"
        "1. **Time Complexity**: Big-O notation with explanation\n"
        "2. **Space Complexity**: Big-O notation with explanation\n"
        "3. **Optimization Suggestions**: If any improvements can be made\n\n"
        "Be clear and concise."
    )
    return prefix, suffix
