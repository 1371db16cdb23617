"""
FRAMEWORK SERVICE - Template-based prompt construction

Fills named prompt frameworks (RACE, CARE, APE, ...) from free-text fields.

Each framework is an ordered list of slots. A slot renders one clause; when
the caller leaves it unset the slot's default phrase is used, and a slot with
no default is omitted. The primary slot takes the user's free text (the
"input" field) and is the only required one. No raw placeholder can survive
rendering.

The catalog is built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from promptsmith.utils import get_logger, is_blank, validate_prompt_text

logger = get_logger(__name__)

INPUT_FIELD = "input"

@dataclass(frozen=True)
class Slot:
    """One clause of a framework: `clause` is a format string with a single {}."""
    name: str
    clause: str
    default: Optional[str] = None

@dataclass(frozen=True)
class Framework:
    id: str
    name: str
    description: str
    guide: str  # Short description handed to the generation gateway
    primary: str
    slots: Tuple[Slot, ...]
    separator: str = "\n"

    @property
    def field_names(self) -> List[str]:
        return [slot.name for slot in self.slots]

def _line(name: str, label: str, default: Optional[str] = None) -> Slot:
    return Slot(name, label + ": {}", default)

_FRAMEWORKS = (
    Framework(
        id="standard",
        name="Standard Prompt",
        description="For general use prompt generation",
        guide="Standard Prompt - General use prompt generation with role, task, context, and output format",
        primary=INPUT_FIELD,
        separator=" ",
        slots=(
            Slot("role", "You are {}.", "an expert assistant"),
            Slot(INPUT_FIELD, "{}."),
            Slot("context", "Context: {}."),
            Slot("output_format", "{}", "Please provide a comprehensive and helpful response with clear "
                                        "explanations and practical examples where applicable."),
        ),
    ),
    Framework(
        id="reasoning",
        name="Reasoning Prompt",
        description="For reasoning tasks and complex problem solving",
        guide="Reasoning Prompt - For complex problem solving with step-by-step analysis",
        primary=INPUT_FIELD,
        separator=" ",
        slots=(
            Slot(INPUT_FIELD, "Think step by step about this problem: {}."),
            Slot("approach", "{}", "Analyze the situation carefully, consider multiple perspectives, and provide "
                                   "a logical solution with clear reasoning for each step."),
        ),
    ),
    Framework(
        id="race",
        name="RACE Framework",
        description="Role, Action, Context, Explanation",
        guide="RACE Framework - Role, Action, Context, Explanation structure",
        primary="action",
        slots=(
            _line("role", "Role", "Expert advisor"),
            _line("action", "Action"),
            _line("context", "Context", "This task requires careful consideration and expertise"),
            _line("explanation", "Explanation", "Please provide detailed reasoning and practical steps to "
                                                "accomplish this effectively."),
        ),
    ),
    Framework(
        id="care",
        name="CARE Framework",
        description="Context, Action, Result, Example",
        guide="CARE Framework - Context, Action, Result, Example structure",
        primary="context",
        slots=(
            _line("context", "Context"),
            _line("action", "Action", "Provide comprehensive guidance"),
            _line("result", "Result", "A clear, actionable solution"),
            _line("example", "Example", "Include relevant examples to illustrate key points."),
        ),
    ),
    Framework(
        id="ape",
        name="APE Framework",
        description="Action, Purpose, Execution",
        guide="APE Framework - Action, Purpose, Execution structure",
        primary="action",
        slots=(
            _line("action", "Action"),
            _line("purpose", "Purpose", "To achieve the best possible outcome"),
            _line("execution", "Execution", "Provide step-by-step instructions with clear methodology."),
        ),
    ),
    Framework(
        id="create",
        name="CREATE Framework",
        description="Character, Request, Examples, Adjustments, Type, Extras",
        guide="CREATE Framework - Character, Request, Examples, Adjustments, Type, Extras structure",
        primary="request",
        slots=(
            _line("character", "Character", "Expert in the relevant field"),
            _line("request", "Request"),
            _line("examples", "Examples", "Provide concrete examples"),
            _line("adjustments", "Adjustments", "Tailor the response to specific needs"),
            _line("type", "Type", "Comprehensive guide"),
            _line("extras", "Extras", "Include tips and best practices."),
        ),
    ),
    Framework(
        id="tag",
        name="TAG Framework",
        description="Task, Action, Goal",
        guide="TAG Framework - Task, Action, Goal structure",
        primary="task",
        slots=(
            _line("task", "Task"),
            _line("action", "Action", "Provide detailed guidance"),
            _line("goal", "Goal", "Achieve the desired outcome efficiently and effectively."),
        ),
    ),
    Framework(
        id="creo",
        name="CREO Framework",
        description="Context, Request, Explanation, Outcome",
        guide="CREO Framework - Context, Request, Explanation, Outcome structure",
        primary="context",
        slots=(
            _line("context", "Context"),
            _line("request", "Request", "Comprehensive assistance"),
            _line("explanation", "Explanation", "Provide clear reasoning and methodology"),
            _line("outcome", "Outcome", "A practical, actionable solution."),
        ),
    ),
)

TEXT_FRAMEWORKS: Mapping[str, Framework] = MappingProxyType({f.id: f for f in _FRAMEWORKS})

# Used for unknown framework ids instead of failing
FALLBACK_FRAMEWORK = Framework(
    id="default",
    name="Comprehensive Assistant",
    description="Generic fallback when the framework is not recognised",
    guide=TEXT_FRAMEWORKS["standard"].guide,
    primary=INPUT_FIELD,
    separator=" ",
    slots=(
        Slot(INPUT_FIELD, "You are an expert assistant. {}."),
        Slot("output_format", "{}", "Please provide a comprehensive and helpful response."),
    ),
)

QUICK_SUGGESTIONS = (
    "Write a thank you email",
    "Write user requirements",
    "Create content calendar",
    "Brainstorm marketing ideas",
    "Draft a job description",
    "Generate meeting agenda",
    "Write a blog post outline",
    "Draft a product description",
)

def get_framework(framework_id: str) -> Optional[Framework]:
    """Catalog lookup; None for unknown ids."""
    return TEXT_FRAMEWORKS.get(framework_id)

def list_frameworks() -> List[Framework]:
    return list(TEXT_FRAMEWORKS.values())

def resolve_framework(framework_id: str) -> Tuple[Framework, bool]:
    """Return (framework, used_fallback)."""
    framework = get_framework(framework_id)
    if framework is None:
        logger.info(f"Unknown framework '{framework_id}', using fallback template")
        return FALLBACK_FRAMEWORK, True
    return framework, False

def _primary_value(framework: Framework, fields: Mapping[str, Optional[str]], fallback: bool) -> str:
    value = fields.get(framework.primary)
    if is_blank(value):
        value = fields.get(INPUT_FIELD)
    if is_blank(value) and fallback:
        # The generic template has no named slots, so take whatever text was given
        value = next((v for v in fields.values() if not is_blank(v)), None)
    return validate_prompt_text(value, "Input required").strip()

def _fill(slot: Slot, value: str) -> str:
    # A single closing period is absorbed by the clause; ellipses are left alone
    if slot.clause.endswith("{}.") and value.endswith(".") and not value.endswith(".."):
        value = value[:-1]
    return slot.clause.format(value)

def render(framework_id: str, fields: Optional[Mapping[str, Optional[str]]] = None) -> str:
    """
    Render a framework into a prompt string.

    Unknown ids fall back to the generic assistant template. Raises
    EmptyPromptError("Input required") when the primary text is missing.
    """
    fields = fields or {}
    framework, fallback = resolve_framework(framework_id)
    values: Dict[str, str] = {framework.primary: _primary_value(framework, fields, fallback)}

    clauses = []
    for slot in framework.slots:
        value = values.get(slot.name)
        if value is None:
            given = fields.get(slot.name)
            value = given.strip() if not is_blank(given) else slot.default
        if value is None:
            continue
        clauses.append(_fill(slot, value))

    return framework.separator.join(clauses)
