"""Lightweight formatting for the narrative analysis.

The model is asked for a fixed layout; anything that does not match a known
marker falls back to a plain paragraph.
"""
from __future__ import annotations

import html
import re
from typing import List

SECTION_MARKERS = ("💰", "📊", "✨", "⚠️", "🤔")
TLDR_MARKER = "<strong>TL;DR: The Bottom Line</strong>"
DISCLAIMER_MARKER = "This is an AI-generated analysis"

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
# Section emoji, optionally followed by the emoji variation selector.
_MARKER_RE = re.compile("^(?:\U0001F4B0|\U0001F4CA|\u2728|\u26A0|\U0001F914)\uFE0F?\\s*")


def analysis_to_html(markdown: str) -> str:
    if not markdown:
        return ""
    text = _BOLD_RE.sub(r"<strong>\1</strong>", html.escape(markdown, quote=False))
    parts: List[str] = []
    in_list = False
    for line in text.strip().split("\n"):
        stripped = line.strip()
        if stripped.startswith("- "):
            if not in_list:
                parts.append("<ul>")
                in_list = True
            parts.append(f"<li>{stripped[2:]}</li>")
            continue
        if in_list:
            parts.append("</ul>")
            in_list = False
        if not stripped:
            continue
        if TLDR_MARKER in stripped:
            parts.append(f'<h2 class="analysis-tldr">{stripped}</h2>')
        elif stripped.startswith(SECTION_MARKERS):
            parts.append(f'<h3 class="analysis-section">{stripped}</h3>')
        elif stripped.startswith("### "):
            parts.append(f'<h3 class="analysis-section">{stripped[4:]}</h3>')
        elif DISCLAIMER_MARKER in stripped:
            parts.append(f'<p class="analysis-disclaimer"><em>{stripped}</em></p>')
        else:
            parts.append(f"<p>{stripped}</p>")
    if in_list:
        parts.append("</ul>")
    return "\n".join(parts)


def analysis_paragraphs(markdown: str) -> List[str]:
    """Non-empty lines with ``**bold**`` converted to reportlab ``<b>`` tags.

    Leading section emoji are dropped; the PDF base fonts have no glyphs for them.
    """
    out = []
    for line in (markdown or "").split("\n"):
        stripped = _MARKER_RE.sub("", line.strip())
        if stripped:
            out.append(_BOLD_RE.sub(r"<b>\1</b>", html.escape(stripped, quote=False)))
    return out
