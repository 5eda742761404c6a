"""Section Contact — coordonnées et carte."""
from .base import SectionContent, SectionKind


class ContactContent(SectionContent):
    title: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    map_embed: str = ""


CONTACT = SectionKind(
    type="contact",
    label="Contact Section",
    empty=ContactContent().model_dump(),
    default=ContactContent(title="Contact Us").model_dump(),
    layout="centered",
    anchor="contact",
    render_key="contact",
)
