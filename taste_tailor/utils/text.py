"""Helpers for cleaning model output before it is shown or parsed."""

import re


_QUOTES = re.compile(r'["“”]')
_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?|\n?```\s*$")


def clean_label(text: str) -> str:
    """Strip quote characters and surrounding whitespace from a generated label."""
    return _QUOTES.sub("", text).strip()


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code block (```json ... ```) if present."""
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE.sub("", text)
    return text.strip()


def join_list(values: list[str]) -> str:
    """Render a list the way prompts interpolate it."""
    return ", ".join(values)
