"""
PYDANTIC SCHEMAS - Request/response data validation

This file defines the data structures for API requests and responses using Pydantic.
These schemas provide:
1. Input validation for API endpoints
2. Type safety and documentation
3. Automatic JSON serialization/deserialization
4. Clear API contracts

Emptiness of the prompt text is checked by the engines (400 "Prompt required"),
not here, so that every caller gets the same message.
"""

from pydantic import BaseModel, Field, validator
from typing import Dict, List, Optional
from promptsmith.config import MAX_PROMPT_LENGTH
from promptsmith.services.signals import SignalSet
from promptsmith.utils import Constants

def normalize_framework_id(value: str) -> str:
    """Framework ids are matched case-insensitively, ignoring surrounding spaces."""
    return value.strip().lower()

class PromptIn(BaseModel):
    """Input schema for the analyze and optimize endpoints."""
    prompt: str = Field(..., max_length=MAX_PROMPT_LENGTH, description="Raw prompt text to inspect")

class AnalysisReport(BaseModel):
    """
    Output of the quality checker.

    All dimension scores are integers in [0, 100]. Feedback lists keep the
    order in which the dimensions were evaluated: clarity, specificity,
    structure, effectiveness.
    """
    overall_score: int  # Rounded mean of the four dimensions
    clarity: int
    specificity: int
    structure: int
    effectiveness: int
    label: str  # Excellent / Good / Fair / Needs Improvement
    strengths: List[str] = []
    warnings: List[str] = []
    suggestions: List[str] = []
    signals: SignalSet

class OptimizationReport(BaseModel):
    """
    Output of the optimizer.

    score is clamped to [20, 100]; optimized_prompt is the original text with
    remediating phrases inserted.
    """
    score: int
    issues: List[str] = []
    improvements: List[str] = []
    optimized_prompt: str

class RenderIn(BaseModel):
    """
    Input schema for rendering a text framework.

    "input" in fields is the user's free text and fills the framework's
    primary slot when that slot is not given explicitly.
    """
    framework: str = Field("standard", max_length=64)
    fields: Dict[str, Optional[str]] = Field(default_factory=dict)

    @validator("framework")
    def normalize_framework(cls, v):
        return normalize_framework_id(v)

    @validator("fields")
    def limit_fields(cls, v):
        if len(v) > Constants.MAX_RENDER_FIELDS:
            raise ValueError(f"At most {Constants.MAX_RENDER_FIELDS} fields are allowed")
        for name, value in v.items():
            if len(name) > 64:
                raise ValueError("Field names are limited to 64 characters")
            if value is not None and len(value) > Constants.MAX_FIELD_LENGTH:
                raise ValueError(f"Field '{name}' exceeds {Constants.MAX_FIELD_LENGTH} characters")
        return v

class RenderOut(BaseModel):
    framework: str  # The framework actually used
    prompt: str
    fallback: bool = False  # True when the requested framework was unknown

class AssistantPromptIn(BaseModel):
    """Input schema for the assistant (Claude-style) prompt builder."""
    framework: str = Field("analytical", max_length=64)
    task: str = Field(..., max_length=Constants.MAX_FIELD_LENGTH, description="What the assistant should help with")
    context: Optional[str] = Field(None, max_length=Constants.MAX_FIELD_LENGTH)
    output_style: Optional[str] = Field(None, max_length=200, description="e.g. concise, formal, friendly")

    @validator("framework")
    def normalize_framework(cls, v):
        return normalize_framework_id(v)

class ImagePromptIn(BaseModel):
    """Input schema for the image (Midjourney-style) prompt builder."""
    subject: str = Field(..., max_length=Constants.MAX_FIELD_LENGTH, description="Subject or scene description")
    style: Optional[str] = Field(None, max_length=100)
    lighting: Optional[str] = Field(None, max_length=100)
    details: Optional[str] = Field(None, max_length=Constants.MAX_FIELD_LENGTH, description="Colors, mood, composition")
    aspect_ratio: str = Field("1:1", max_length=8)

class PromptOut(BaseModel):
    prompt: str

class FrameworkOut(BaseModel):
    id: str
    name: str
    description: str
    fields: List[str] = []

class CatalogOut(BaseModel):
    kind: str
    frameworks: List[FrameworkOut]
    suggestions: List[str]

class AspectRatioOut(BaseModel):
    value: str
    label: str

class ImageOptionsOut(BaseModel):
    aspect_ratios: List[AspectRatioOut]
    styles: List[str]
    lighting: List[str]
    suggestions: List[str]

class GenerateIn(BaseModel):
    """Input schema for language-aware generation through the AI gateway."""
    input: str = Field(..., max_length=MAX_PROMPT_LENGTH, description="What the prompt should do, in any language")
    framework: str = Field("standard", max_length=64)

    @validator("framework")
    def normalize_framework(cls, v):
        return normalize_framework_id(v)
