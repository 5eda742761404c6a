"""
Schémas Pydantic du moteur de composition des sites académie.

Deux modèles coexistent :
  Section        → unité éditable (type, contenu, visibilité, ordre)
  SectionConfig  → descripteur de rendu (clé, layout, ancre)

SiteConfig regroupe les SectionConfig, le Theme et les métadonnées SEO.
"""
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SectionType = Literal["hero", "about", "features", "team", "gallery", "contact", "custom"]

SectionKey = Literal["hero", "about", "features", "programs", "team", "gallery", "contact"]

LayoutType = Literal["full", "container", "centered"]

# Blob plat persisté (hero_title, features, introduction…)
ContentBlob = dict


class Section(BaseModel):
    """Section éditable d'une page publique."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: SectionType
    title: str = ""
    # Forme indicative selon le type — jamais validée ici
    content: Any = Field(default_factory=dict)
    is_visible: bool = Field(default=True, alias="isVisible")
    order: int = 0


class SectionConfig(BaseModel):
    """Descripteur de rendu consommé par le renderer."""
    key: SectionKey
    layout: LayoutType = "container"
    id: Optional[str] = None
    # Section éditable d'origine (projection de la liste) ; None pour le squelette fixe
    section_id: Optional[str] = None


class Theme(BaseModel):
    """Deux classes CSS appliquées une seule fois à la racine de la page."""
    background: Optional[str] = None
    text: Optional[str] = None


class Organization(BaseModel):
    """Données schema.org Organization (JSON-LD) du tenant."""
    name: str
    url: Optional[str] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    logo: Optional[str] = None


class SeoMeta(BaseModel):
    title: str
    description: Optional[str] = None
    canonical: Optional[str] = None
    organization: Optional[Organization] = None


class SiteConfig(BaseModel):
    """Configuration de rendu d'un site tenant."""
    sections: List[SectionConfig] = Field(default_factory=list)
    theme: Theme = Field(default_factory=Theme)
    seo: SeoMeta
