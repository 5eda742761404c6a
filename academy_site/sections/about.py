"""Section About — présentation, mission, vision, valeurs."""
from typing import List

from pydantic import Field

from .base import SectionContent, SectionKind


class AboutContent(SectionContent):
    introduction: str = ""
    mission: str = ""
    vision: str = ""
    values: List[str] = Field(default_factory=list)


ABOUT = SectionKind(
    type="about",
    label="About Section",
    field_map={
        "introduction": "introduction",
        "mission":      "mission",
        "vision":       "vision",
        "values":       "values",
    },
    markers=("introduction", "mission"),
    decode_order=3,
    empty=AboutContent().model_dump(),
    default=AboutContent(
        introduction="Introduction text...",
        mission="Our mission...",
        vision="Our vision...",
        values=["Value 1", "Value 2", "Value 3"],
    ).model_dump(),
    seed=AboutContent(
        introduction="Welcome to our academy...",
        mission="Our mission is...",
        vision="Our vision is...",
        values=["Excellence", "Integrity", "Teamwork"],
    ).model_dump(),
    anchor="about",
    render_key="about",
)
