"""Section Hero — titre, sous-titre, image de fond et CTA."""
from .base import SectionContent, SectionKind


class HeroContent(SectionContent):
    title: str = ""
    subtitle: str = ""
    description: str = ""
    background_image: str = ""
    cta_text: str = ""
    cta_link: str = ""


HERO = SectionKind(
    type="hero",
    label="Hero Section",
    field_map={
        "title":            "hero_title",
        "subtitle":         "hero_subtitle",
        "description":      "hero_description",
        "background_image": "hero_background",
        "cta_text":         "cta_text",
        "cta_link":         "cta_link",
    },
    markers=("hero_title", "hero_subtitle"),
    decode_order=1,
    empty=HeroContent().model_dump(),
    default=HeroContent(
        title="New Hero Title",
        subtitle="Subtitle",
        description="Description",
        cta_text="Call to Action",
        cta_link="#",
    ).model_dump(),
    seed=HeroContent(
        title="Welcome to Our Academy",
        subtitle="Excellence in Sports Training",
        description="Join us for world-class training and development",
        cta_text="Get Started",
        cta_link="#contact",
    ).model_dump(),
    layout="full",
    anchor="home",
    render_key="hero",
)
