"""
SIGNAL EXTRACTOR - Lexical markers found in a prompt

Both the quality checker and the optimizer work from the same SignalSet.
Every cue is a case-insensitive substring search; nothing here tries to
understand what the prompt means.
"""

import re
from dataclasses import dataclass
from typing import Iterable

ROLE_CUES = ("you are", "act as")
CONTEXT_CUES = ("context",)
INSTRUCTION_CUES = ("please", "make sure", "ensure")
FORMAT_CUES = ("format", "structure")
EXAMPLE_CUES = ("example", "for instance")
STEPWISE_CUES = ("step by step",)

# Long prompts count as carrying context even without the word itself
CONTEXT_LENGTH_THRESHOLD = 150

_SENTENCE_BREAK = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class SignalSet:
    """Markers computed once per analysis call."""
    word_count: int
    sentence_count: int
    char_count: int
    has_role_cue: bool
    has_context_cue: bool
    has_instruction_cue: bool
    has_format_cue: bool
    has_example_cue: bool
    has_stepwise_cue: bool


def contains_any(text: str, cues: Iterable[str]) -> bool:
    """Case-insensitive check for any of the cues in text."""
    lowered = text.lower()
    return any(cue in lowered for cue in cues)


def count_words(text: str) -> int:
    return len(text.split())


def count_sentences(text: str) -> int:
    """Non-empty segments between '.', '!' and '?'."""
    return sum(1 for part in _SENTENCE_BREAK.split(text) if part.strip())


def extract_signals(prompt: str) -> SignalSet:
    """Scan raw prompt text for structural and lexical markers."""
    return SignalSet(
        word_count=count_words(prompt),
        sentence_count=count_sentences(prompt),
        char_count=len(prompt),
        has_role_cue=contains_any(prompt, ROLE_CUES),
        has_context_cue=contains_any(prompt, CONTEXT_CUES) or len(prompt) > CONTEXT_LENGTH_THRESHOLD,
        has_instruction_cue=contains_any(prompt, INSTRUCTION_CUES),
        has_format_cue=contains_any(prompt, FORMAT_CUES),
        has_example_cue=contains_any(prompt, EXAMPLE_CUES),
        has_stepwise_cue=contains_any(prompt, STEPWISE_CUES),
    )
