"""
FRAMEWORKS ROUTE - Template-based prompt builders

Endpoints for the three offline prompt builders:
1. Text frameworks (standard, reasoning, RACE, CARE, APE, CREATE, TAG, CREO)
2. Assistant frameworks (analytical, creative, research, tutor, ...)
3. Image prompts (subject, style, lighting, aspect ratio)

All of them are pure string rendering over static catalogs.
"""

from typing import Literal
from fastapi import APIRouter, Query
from promptsmith.schemas import (
    AspectRatioOut,
    AssistantPromptIn,
    CatalogOut,
    FrameworkOut,
    ImageOptionsOut,
    ImagePromptIn,
    PromptOut,
    RenderIn,
    RenderOut,
)
from promptsmith.services import assistant_prompts, frameworks, image_prompts
from promptsmith.utils import handle_service_errors, get_logger

logger = get_logger(__name__)

router = APIRouter()

@router.get("", response_model=CatalogOut)
def list_catalog(kind: Literal["text", "assistant"] = Query("text")):
    """List the frameworks of one kind together with quick-start suggestions."""
    if kind == "assistant":
        items = [
            FrameworkOut(id=f.id, name=f.name, description=f.description, fields=["task", "context", "output_style"])
            for f in assistant_prompts.list_assistant_frameworks()
        ]
        return CatalogOut(kind=kind, frameworks=items, suggestions=list(assistant_prompts.QUICK_SUGGESTIONS))

    items = [
        FrameworkOut(id=f.id, name=f.name, description=f.description, fields=f.field_names)
        for f in frameworks.list_frameworks()
    ]
    return CatalogOut(kind=kind, frameworks=items, suggestions=list(frameworks.QUICK_SUGGESTIONS))

@router.post("/render", response_model=RenderOut)
@handle_service_errors
def render(payload: RenderIn):
    """
    Render a text framework.

    Unknown framework ids are not an error: the generic assistant template is
    used and `fallback` is set.
    """
    framework, fallback = frameworks.resolve_framework(payload.framework)
    prompt = frameworks.render(payload.framework, payload.fields)
    return RenderOut(framework=framework.id, prompt=prompt, fallback=fallback)

@router.post("/assistant", response_model=PromptOut)
@handle_service_errors
def render_assistant(payload: AssistantPromptIn):
    """Render an assistant framework around a task."""
    prompt = assistant_prompts.render_assistant(
        payload.framework,
        payload.task,
        context=payload.context,
        output_style=payload.output_style,
    )
    return PromptOut(prompt=prompt)

@router.get("/image/options", response_model=ImageOptionsOut)
def image_options():
    """Aspect ratios, art styles, lighting presets and sample subjects."""
    return ImageOptionsOut(
        aspect_ratios=[AspectRatioOut(value=v, label=l) for v, l in image_prompts.ASPECT_RATIOS],
        styles=list(image_prompts.ART_STYLES),
        lighting=list(image_prompts.LIGHTING_OPTIONS),
        suggestions=list(image_prompts.QUICK_SUGGESTIONS),
    )

@router.post("/image", response_model=PromptOut)
@handle_service_errors
def build_image(payload: ImagePromptIn):
    """Build an image prompt ending in the aspect-ratio and version tags."""
    prompt = image_prompts.build_image_prompt(
        payload.subject,
        style=payload.style,
        lighting=payload.lighting,
        details=payload.details,
        aspect_ratio=payload.aspect_ratio,
    )
    return PromptOut(prompt=prompt)
