"""Renderers — composition HTML + SectionMap par défaut."""
from .base import RenderFn, Renderer, SectionMap
from .html import HtmlRenderer, render_document, render_sections, with_layout
from .sections import build_section_map

__all__ = [
    "RenderFn", "Renderer", "SectionMap",
    "HtmlRenderer", "render_document", "render_sections", "with_layout",
    "build_section_map",
]
