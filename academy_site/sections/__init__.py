"""
Registry des types de section — exports publics + lookup par type.
"""
from typing import List, Optional

from .base import SectionContent, SectionKind
from .hero import HERO, HeroContent
from .about import ABOUT, AboutContent
from .features import FEATURES, FeaturesContent, FeatureItem
from .gallery import GALLERY, GalleryContent
from .contact import CONTACT, ContactContent
from .team import TEAM, CUSTOM

_KIND_REGISTRY: dict = {
    kind.type: kind
    for kind in (HERO, ABOUT, FEATURES, TEAM, GALLERY, CONTACT, CUSTOM)
}

# Page de démarrage : ordre différent de celui du décodage
STARTER_TYPES = ("hero", "about", "features")

_CONTENT_MODELS: dict = {
    "hero":     HeroContent,
    "about":    AboutContent,
    "features": FeaturesContent,
    "gallery":  GalleryContent,
    "contact":  ContactContent,
}


def get_kind(section_type: str) -> Optional[SectionKind]:
    return _KIND_REGISTRY.get(section_type)


def registered_types() -> List[str]:
    return list(_KIND_REGISTRY)


def decode_kinds() -> List[SectionKind]:
    """Types décodables depuis un blob, dans l'ordre d'évaluation."""
    kinds = [k for k in _KIND_REGISTRY.values() if k.decode_order is not None]
    return sorted(kinds, key=lambda k: k.decode_order)


def get_default_content(section_type: str) -> dict:
    """
    Contenu par défaut d'un type de section.

    Type inconnu ou sans contenu propre → {} (l'éditeur affiche un formulaire vide).
    """
    kind = _KIND_REGISTRY.get(section_type)
    if kind is None:
        return {}
    return kind.default_content()


def section_catalog() -> List[dict]:
    """Catalogue des types pour les éditeurs : libellé, champs, contenu par défaut."""
    catalog = []
    for kind in _KIND_REGISTRY.values():
        model = _CONTENT_MODELS.get(kind.type)
        catalog.append({
            "type":            kind.type,
            "label":           kind.label,
            "fields":          list(kind.empty),
            "persisted":       kind.persisted,
            "default_content": kind.default_content(),
            "schema":          model.model_json_schema() if model else None,
        })
    return catalog


__all__ = [
    "SectionContent", "SectionKind",
    "HERO", "ABOUT", "FEATURES", "TEAM", "GALLERY", "CONTACT", "CUSTOM",
    "HeroContent", "AboutContent", "FeaturesContent", "FeatureItem",
    "GalleryContent", "ContactContent",
    "STARTER_TYPES",
    "get_kind", "registered_types", "decode_kinds",
    "get_default_content", "section_catalog",
]
