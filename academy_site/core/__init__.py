"""Core module pour academy_site."""
from .schemas import (
    ContentBlob,
    LayoutType,
    Organization,
    Section,
    SectionConfig,
    SectionKey,
    SectionType,
    SeoMeta,
    SiteConfig,
    Theme,
)

__all__ = [
    "ContentBlob",
    "LayoutType",
    "Organization",
    "Section",
    "SectionConfig",
    "SectionKey",
    "SectionType",
    "SeoMeta",
    "SiteConfig",
    "Theme",
]
