"""Prompt templates for each step of the generation pipeline."""

import json
from typing import Dict, Optional, Sequence

STYLE_PRESETS = [
    "Holographic 3D",
    "SaaS Minimal",
    "Cyberpunk",
    "Neubrutalist",
    "Glassmorphism",
    "Apple-Style",
]


def build_context(
    prompt: str,
    style_tags: Sequence[str] = (),
    answers: Optional[Dict[str, str]] = None,
) -> str:
    """Combine the request, style tags and answered preferences into one block."""
    lines = [f'User Request: "{prompt}"']
    if style_tags:
        lines.append(f"Styles: {', '.join(style_tags)}")
    for answer in (answers or {}).values():
        lines.append(f"- Preference: {answer}")
    return "\n".join(lines)


def clarifying_questions_prompt(prompt: str, style_tags: Sequence[str] = ()) -> str:
    return (
        f'You are a senior Product Manager. The user wants: "{prompt}".\n'
        f"Contextual Tags: {', '.join(style_tags)}.\n\n"
        "Generate 3 SHORT, specific, multiple-choice questions to clarify the design goals "
        "(e.g., Target Audience, Vibe, Specific Functionality).\n"
        "Return ONLY a raw JSON array:\n"
        "[\n"
        '  { "id": "q1", "text": "Question?", "options": ["Opt A", "Opt B", "Opt C"] }\n'
        "]"
    )


def style_directions_prompt(context: str, count: int) -> str:
    examples = ", ".join(f'"Direction Name {i + 1}"' for i in range(count))
    return (
        f"Generate {count} distinct, high-end visual directions for a web interface "
        "based on this context:\n"
        f"{context}\n\n"
        "REQUIREMENTS:\n"
        "- Directions must be HIGHLY diverse (e.g. one Minimal, one 3D/Spatial, "
        "one Complex/Data-heavy).\n"
        '- If the user asked for "3D" or "Futuristic", ensure most directions are '
        "heavily stylized.\n"
        f"- Return ONLY a raw JSON array of strings: [{examples}]."
    )


def artifact_prompt(context: str, style_name: str) -> str:
    return (
        "Act as a Lead Frontend Architect. Create a production-ready HTML/CSS component.\n\n"
        f"CONTEXT:\n{context}\n\n"
        f"CHOSEN AESTHETIC: {style_name}\n\n"
        "TECHNICAL MANDATES:\n"
        "1. Depth: use perspective transforms, box-shadow and layering when the style calls for it.\n"
        "2. Modern CSS: :has(), backdrop-filter, mix-blend-mode and CSS Grid.\n"
        "3. Interactivity: rich :hover states that scale, glow or shift.\n"
        "4. No external libraries. Raw HTML/CSS only, inline SVG icons allowed.\n"
        "5. Images: unsplash.com source URLs for placeholders.\n"
        "6. Responsive on mobile and desktop.\n\n"
        "OUTPUT:\n"
        "Return ONLY the raw HTML code."
    )


def variations_prompt(
    prompt: str, answers: Optional[Dict[str, str]], current_html: str = ""
) -> str:
    source = f"\nCurrent Component:\n{current_html}\n" if current_html else ""
    return (
        "You are an expert UI Engineer. Create 3 Variations of the provided component.\n"
        f'Original Prompt: "{prompt}"\n'
        f"Context: {json.dumps(answers or {})}\n"
        f"{source}\n"
        'Variation 1: "Dark/Light Mode Flip" (Invert colors, adjust shadows).\n'
        'Variation 2: "Structural Shift" (Change layout from Grid to Flex or Sidebar to Topbar).\n'
        'Variation 3: "Motion & Depth" (Add parallax, 3D tilts, and complex hover effects).\n\n'
        'Output JSON Stream: { "name": "...", "html": "..." }'
    )
