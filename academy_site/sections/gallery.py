"""Section Gallery — titre + images."""
from typing import List

from pydantic import Field

from .base import SectionContent, SectionKind


class GalleryContent(SectionContent):
    title: str = ""
    images: List[str] = Field(default_factory=list)


GALLERY = SectionKind(
    type="gallery",
    label="Gallery Section",
    empty=GalleryContent().model_dump(),
    default=GalleryContent(title="Gallery").model_dump(),
    anchor="gallery",
    render_key="gallery",
)
