"""
ASSISTANT PROMPT SERVICE - Specialised prompts for conversational assistants

Each framework wraps the user's task in a fixed sentence template, then
appends optional context and output-style clauses.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional
from promptsmith.utils import get_logger, is_blank, validate_prompt_text

logger = get_logger(__name__)

DEFAULT_TONE = "professional"

@dataclass(frozen=True)
class AssistantFramework:
    id: str
    name: str
    description: str
    template: str  # {task}, and {tone} when the style is folded into the template
    folds_style: bool = False

_FRAMEWORKS = (
    AssistantFramework(
        "analytical", "Analytical Thinking", "For complex analysis and reasoning tasks",
        "I need you to analyze {task} systematically. Please break down the problem, consider multiple "
        "perspectives, examine the evidence, and provide a well-reasoned conclusion with supporting arguments.",
    ),
    AssistantFramework(
        "creative", "Creative Writing", "For storytelling and creative content",
        "Help me create content about {task}. Focus on engaging storytelling, vivid descriptions, and "
        "compelling elements. Make it creative and original while maintaining a {tone} tone.",
        folds_style=True,
    ),
    AssistantFramework(
        "research", "Research Assistant", "For comprehensive research and information gathering",
        "Act as a research assistant. Help me understand {task} by providing comprehensive information, "
        "key insights, current developments, and reliable sources.",
    ),
    AssistantFramework(
        "tutor", "Educational Tutor", "For learning and educational support",
        "Be my tutor and explain {task} in a clear, structured way. Use examples, analogies, and "
        "step-by-step explanations. Check my understanding and provide practice exercises.",
    ),
    AssistantFramework(
        "consultant", "Strategic Consultant", "For business and strategic advice",
        "Act as a strategic consultant. Analyze {task} and provide actionable recommendations. "
        "Consider risks, opportunities, and implementation strategies.",
    ),
    AssistantFramework(
        "editor", "Content Editor", "For editing and improving written content",
        "Review and improve the following content: {task}. Focus on clarity, coherence, style, and "
        "effectiveness. Provide specific suggestions for enhancement while maintaining the original intent.",
    ),
)

ASSISTANT_FRAMEWORKS: Mapping[str, AssistantFramework] = MappingProxyType({f.id: f for f in _FRAMEWORKS})

FALLBACK_TEMPLATE = "Help me with {task}. Please provide a comprehensive and thoughtful response."

QUICK_SUGGESTIONS = (
    "Write a comprehensive business plan",
    "Analyze market trends and opportunities",
    "Create educational content for students",
    "Develop a research methodology",
    "Edit and improve my writing",
    "Solve complex technical problems",
)

def list_assistant_frameworks() -> List[AssistantFramework]:
    return list(ASSISTANT_FRAMEWORKS.values())

def render_assistant(
    framework_id: str,
    task: str,
    context: Optional[str] = None,
    output_style: Optional[str] = None,
) -> str:
    """Build an assistant prompt; unknown framework ids use a generic template."""
    task = validate_prompt_text(task, "Task required").strip()
    context = None if is_blank(context) else context.strip()
    output_style = None if is_blank(output_style) else output_style.strip()

    framework = ASSISTANT_FRAMEWORKS.get(framework_id)
    if framework is None:
        logger.info(f"Unknown assistant framework '{framework_id}', using fallback template")
        prompt = FALLBACK_TEMPLATE.format(task=task)
        folds_style = False
    else:
        prompt = framework.template.format(task=task, tone=output_style or DEFAULT_TONE)
        folds_style = framework.folds_style

    if context:
        prompt += f" Additional context: {context}"

    if output_style and not folds_style:
        prompt += f" Please respond in a {output_style} manner."

    return prompt
