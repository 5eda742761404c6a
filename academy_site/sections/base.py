"""
Types de section — base commune.

Chaque type est décrit par un SectionKind : une fiche de capacités qui porte
la table de correspondance champ de contenu ↔ clé du blob, les champs
marqueurs pour le décodage, les contenus par défaut et le layout public.
Ajouter un type = ajouter une fiche, pas une nouvelle branche de code.
"""
import copy
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.schemas import LayoutType, SectionType


class SectionContent(BaseModel):
    """Contenu d'une section (textes, URLs, listes). Forme indicative."""
    pass


class SectionKind(BaseModel):
    """Fiche de capacités d'un type de section."""
    model_config = ConfigDict(frozen=True)

    type: SectionType
    label: str
    # champ de contenu → clé du blob persisté
    field_map: Dict[str, str] = Field(default_factory=dict)
    # au moins un marqueur non vide dans le blob → la section est décodée
    markers: Tuple[str, ...] = ()
    # ordre attribué au décodage (None → type jamais décodé)
    decode_order: Optional[int] = None
    # contenu constant ajouté au décodage (non persisté)
    decode_extras: Dict[str, Any] = Field(default_factory=dict)
    empty: Dict[str, Any] = Field(default_factory=dict)
    default: Dict[str, Any] = Field(default_factory=dict)
    seed: Dict[str, Any] = Field(default_factory=dict)
    layout: LayoutType = "container"
    anchor: Optional[str] = None
    # clé de rendu public (None → pas de rendu public)
    render_key: Optional[str] = None

    def default_content(self) -> dict:
        """Contenu d'une nouvelle section ajoutée dans l'éditeur."""
        return copy.deepcopy(self.default)

    def seed_content(self) -> dict:
        """Contenu de la page de démarrage."""
        return copy.deepcopy(self.seed)

    def empty_content(self) -> dict:
        """Contenu vide : tous les champs du type à "" / []."""
        return copy.deepcopy(self.empty)

    @property
    def persisted(self) -> bool:
        return bool(self.field_map)
