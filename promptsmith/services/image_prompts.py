"""
IMAGE PROMPT SERVICE - Midjourney-style prompt builder

subject[, <style> style][, <lighting>][, <details>] --ar <ratio> --v 6

Style and lighting presets are title-cased for display and lowercased in the prompt.
"""

from typing import Optional
from promptsmith.exceptions import InvalidFieldError
from promptsmith.utils import is_blank, validate_prompt_text

VERSION_TAG = "--v 6"
DEFAULT_ASPECT_RATIO = "1:1"

ASPECT_RATIOS = (
    ("1:1", "Square (1:1)"),
    ("16:9", "Landscape (16:9)"),
    ("9:16", "Portrait (9:16)"),
    ("4:3", "Classic (4:3)"),
    ("3:2", "Photo (3:2)"),
)

ART_STYLES = (
    "Photorealistic", "Digital Art", "Oil Painting", "Watercolor", "Sketch",
    "Anime", "Cartoon", "Abstract", "Surreal", "Minimalist", "Vintage", "Cyberpunk",
)

LIGHTING_OPTIONS = (
    "Natural lighting", "Golden hour", "Blue hour", "Studio lighting",
    "Dramatic lighting", "Soft lighting", "Neon lighting", "Candlelight",
)

QUICK_SUGGESTIONS = (
    "A serene mountain landscape at sunset",
    "Portrait of a wise old wizard",
    "Futuristic city skyline",
    "Mystical forest with glowing mushrooms",
    "Elegant woman in 1920s fashion",
    "Steampunk mechanical device",
)

def build_image_prompt(
    subject: str,
    style: Optional[str] = None,
    lighting: Optional[str] = None,
    details: Optional[str] = None,
    aspect_ratio: str = DEFAULT_ASPECT_RATIO,
) -> str:
    subject = validate_prompt_text(subject, "Subject required").strip()
    if aspect_ratio not in dict(ASPECT_RATIOS):
        raise InvalidFieldError(f"Unsupported aspect ratio '{aspect_ratio}'")

    parts = [subject]
    if not is_blank(style):
        parts.append(f"{style.strip().lower()} style")
    if not is_blank(lighting):
        parts.append(lighting.strip().lower())
    if not is_blank(details):
        parts.append(details.strip())

    return f"{', '.join(parts)} --ar {aspect_ratio} {VERSION_TAG}"
