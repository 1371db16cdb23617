"""
SCORING SERVICE - Rule-based prompt quality checker

This service scores a prompt along four 0-100 dimensions without any API calls:
1. Clarity: sentence structure and length
2. Specificity: role definition and output format
3. Structure: context and explicit instructions
4. Effectiveness: examples and a step-by-step request

Scoring is a fold over RULES. Each rule looks at the SignalSet, moves one
dimension by its hit or miss delta and may add one feedback message. Absence
of a cue is penalised as well as its presence rewarded, so terse prompts
score low even without explicit warnings.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from promptsmith.schemas import AnalysisReport
from promptsmith.services.signals import SignalSet, extract_signals
from promptsmith.utils import (
    calculate_overall_score,
    clamp,
    get_logger,
    score_label,
    validate_prompt_text,
)

logger = get_logger(__name__)

DIMENSIONS = ("clarity", "specificity", "structure", "effectiveness")

BASELINES: Dict[str, int] = {
    "clarity": 70,
    "specificity": 60,
    "structure": 65,
    "effectiveness": 60,
}

STRENGTH = "strengths"
WARNING = "warnings"
SUGGESTION = "suggestions"

# (feedback list, message)
Note = Tuple[str, str]

@dataclass(frozen=True)
class Rule:
    """One scoring rule: a check on the signals plus what happens on hit and miss."""
    dimension: str
    check: Callable[[SignalSet], bool]
    hit_delta: int = 0
    miss_delta: int = 0
    on_hit: Optional[Note] = None
    on_miss: Optional[Note] = None

RULES: Tuple[Rule, ...] = (
    # Clarity
    Rule("clarity", lambda s: s.sentence_count >= 2, 10, -20,
         (STRENGTH, "Good sentence structure"),
         (WARNING, "Prompt may be too brief for complex tasks")),
    Rule("clarity", lambda s: s.word_count <= 300, 0, -15,
         None,
         (WARNING, "Prompt might be too lengthy - consider breaking it down")),
    # Specificity
    Rule("specificity", lambda s: s.has_role_cue, 15, -15,
         (STRENGTH, "Clear role definition provided"),
         (SUGGESTION, "Add a specific role or persona for the AI")),
    Rule("specificity", lambda s: s.has_format_cue, 15, -10,
         (STRENGTH, "Output format specified"),
         (SUGGESTION, "Specify desired output format")),
    # Structure
    Rule("structure", lambda s: s.has_context_cue, 15, -15,
         (STRENGTH, "Good contextual information"),
         (SUGGESTION, "Add more context and background information")),
    Rule("structure", lambda s: s.has_instruction_cue, 10, -10,
         (STRENGTH, "Clear instructions provided"),
         (SUGGESTION, "Include more specific instructions")),
    # Effectiveness
    Rule("effectiveness", lambda s: s.has_example_cue, 20, -10,
         (STRENGTH, "Examples provided for clarity"),
         (SUGGESTION, "Consider adding examples to clarify expectations")),
    Rule("effectiveness", lambda s: s.has_stepwise_cue, 15, 0,
         (STRENGTH, "Requests systematic approach"),
         None),
)

def score_signals(
    signals: SignalSet,
    rules: Sequence[Rule] = RULES,
    baselines: Dict[str, int] = BASELINES,
) -> Tuple[Dict[str, int], Dict[str, List[str]]]:
    """
    Apply every rule to the signals (no short-circuiting).

    Returns the clamped dimension scores and the three feedback lists.
    """
    scores = dict(baselines)
    feedback: Dict[str, List[str]] = {STRENGTH: [], WARNING: [], SUGGESTION: []}

    for rule in rules:
        hit = rule.check(signals)
        scores[rule.dimension] += rule.hit_delta if hit else rule.miss_delta
        note = rule.on_hit if hit else rule.on_miss
        if note is not None:
            kind, message = note
            feedback[kind].append(message)

    return {name: clamp(value) for name, value in scores.items()}, feedback

def analyze(prompt: str) -> AnalysisReport:
    """
    Score a prompt and collect strengths, warnings and suggestions.

    Raises EmptyPromptError for empty or whitespace-only text; total otherwise.
    """
    validate_prompt_text(prompt)

    signals = extract_signals(prompt)
    scores, feedback = score_signals(signals)
    overall = calculate_overall_score(scores[d] for d in DIMENSIONS)

    logger.debug(f"Analyzed prompt ({signals.word_count} words): overall={overall}")

    return AnalysisReport(
        overall_score=overall,
        label=score_label(overall),
        signals=signals,
        **scores,
        **feedback,
    )
