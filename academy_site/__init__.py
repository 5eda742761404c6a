"""
Academy Site — composition des pages publiques des académies.

Usage (édition) :
    >>> from academy_site import decode, encode, SectionList
    >>> sections = SectionList(decode(blob))
    >>> sections.move("about", "up")
    >>> blob = encode(sections)

Usage (rendu) :
    >>> from academy_site import build_site_config, build_section_map, render_document
    >>> site = build_site_config(academy, blob)
    >>> html = render_document(site, build_section_map(academy, decode(blob)))
"""
from .core.schemas import (
    ContentBlob,
    Section,
    SectionConfig,
    SeoMeta,
    SiteConfig,
    Theme,
)
from .sections import SectionKind, get_default_content, get_kind, section_catalog
from .codec import decode, default_sections, encode
from .editor import PageEditor, SaveResult, SectionList
from .site_config import build_site_config
from .renderer.html import HtmlRenderer, render_document, render_sections, with_layout
from .renderer.sections import build_section_map

__version__ = "1.0.0"

__all__ = [
    "ContentBlob", "Section", "SectionConfig", "SeoMeta", "SiteConfig", "Theme",
    "SectionKind", "get_default_content", "get_kind", "section_catalog",
    "decode", "encode", "default_sections",
    "PageEditor", "SaveResult", "SectionList",
    "build_site_config",
    "HtmlRenderer", "render_document", "render_sections", "with_layout",
    "build_section_map",
]
