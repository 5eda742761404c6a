"""Sections sans contenu propre : Team (membres lus côté tenant) et Custom."""
from .base import SectionKind

TEAM = SectionKind(
    type="team",
    label="Team Section",
    anchor="team",
    render_key="team",
)

# Pas de rendu public ni de persistance
CUSTOM = SectionKind(
    type="custom",
    label="Custom Section",
)
