"""
Édition des sections d'une page.

SectionList  : opérations en mémoire (add / update / remove / move / set_visible)
PageEditor   : session d'édition — load (decode) → opérations → save (encode + upsert)
"""
import logging
import time
from typing import Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel

from .codec import decode, default_sections, encode
from .core.schemas import ContentBlob, Section, SectionType
from .sections import get_default_content
from .store import PageStore, StoreError

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]

_FIELD_ALIASES = {"isVisible": "is_visible"}


def _now_ms() -> int:
    return int(time.time() * 1000)


class SectionList:
    """Liste ordonnée de sections, détenue par l'éditeur entre decode et encode."""

    def __init__(self, sections: Optional[List[Section]] = None):
        self._sections: List[Section] = list(sections or [])

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __getitem__(self, index: int) -> Section:
        return self._sections[index]

    @property
    def sections(self) -> List[Section]:
        return list(self._sections)

    def ids(self) -> List[str]:
        return [s.id for s in self._sections]

    def get(self, section_id: str) -> Optional[Section]:
        index = self._index(section_id)
        return None if index is None else self._sections[index]

    def ordered(self) -> List[Section]:
        """Sections triées par `order` (tri stable)."""
        return sorted(self._sections, key=lambda s: s.order)

    def _index(self, section_id: str) -> Optional[int]:
        for i, section in enumerate(self._sections):
            if section.id == section_id:
                return i
        return None

    def _new_id(self, section_type: str) -> str:
        stamp = _now_ms()
        existing = set(self.ids())
        while f"{section_type}-{stamp}" in existing:
            stamp += 1
        return f"{section_type}-{stamp}"

    # ── Opérations ──────────────────────────────────────────────────────────

    def add(self, section_type: SectionType) -> Section:
        """Ajoute une section en fin de liste avec le contenu par défaut du type."""
        section = Section(
            id=self._new_id(section_type),
            type=section_type,
            title=f"{section_type.capitalize()} Section",
            content=get_default_content(section_type),
            is_visible=True,
            order=len(self._sections) + 1,
        )
        self._sections.append(section)
        return section

    def update(self, section_id: str, partial: dict) -> Optional[Section]:
        """
        Fusion superficielle des champs de premier niveau.

        `content` est remplacé en bloc : l'appelant doit repartir de l'ancien
        contenu s'il veut conserver les autres champs.
        """
        index = self._index(section_id)
        if index is None:
            return None

        data = self._sections[index].model_dump()
        for key, value in partial.items():
            data[_FIELD_ALIASES.get(key, key)] = value

        new_id = data.get("id")
        if new_id != section_id and new_id in self.ids():
            raise ValueError(f"Identifiant de section déjà utilisé : {new_id!r}")

        updated = Section.model_validate(data)
        self._sections[index] = updated
        return updated

    def remove(self, section_id: str) -> bool:
        """Retire la section. Les `order` restants ne sont pas renumérotés."""
        before = len(self._sections)
        self._sections = [s for s in self._sections if s.id != section_id]
        return len(self._sections) != before

    def move(self, section_id: str, direction: Direction) -> bool:
        """
        Échange la section avec sa voisine immédiate dans la liste.

        Les deux `order` sont ensuite redistribués selon la nouvelle position
        (le plus petit à la première), même si la paire était inversée avant
        le déplacement. Sans effet aux extrémités ou pour un id inconnu.
        """
        if direction not in ("up", "down"):
            raise ValueError(f"Direction invalide : {direction!r}")

        index = self._index(section_id)
        if index is None:
            return False

        target = index - 1 if direction == "up" else index + 1
        if not 0 <= target < len(self._sections):
            return False

        current, neighbour = self._sections[index], self._sections[target]
        self._sections[index], self._sections[target] = neighbour, current

        first, second = sorted((index, target))
        low, high = sorted((current.order, neighbour.order))
        self._sections[first].order = low
        self._sections[second].order = high
        return True

    def set_visible(self, section_id: str, visible: bool) -> bool:
        section = self.get(section_id)
        if section is None:
            return False
        section.is_visible = visible
        return True


# ── Session d'édition ───────────────────────────────────────────────────────

def page_title_for_slug(slug: str) -> str:
    return "Home" if slug == "homepage" else "About Us"


class SaveResult(BaseModel):
    success: bool
    content: ContentBlob
    error: Optional[str] = None


class PageEditor:
    """
    Session d'édition d'une page (tenant, slug).

    Les erreurs du store ne sont jamais fatales : elles sont journalisées,
    ajoutées aux notifications, et la liste en mémoire reste intacte pour
    permettre de relancer la sauvegarde.
    """

    def __init__(self, store: PageStore, academy_id: str, slug: str):
        self.store = store
        self.academy_id = academy_id
        self.slug = slug
        self.sections = SectionList()
        self.meta_description: Optional[str] = None
        self.is_default = False
        self.notifications: List[Tuple[str, str]] = []
        self._closed = False

    def _notify(self, level: str, message: str):
        self.notifications.append((level, message))

    def load(self) -> bool:
        """Charge le blob persisté (ou la page de démarrage s'il n'existe pas)."""
        try:
            record = self.store.load(self.academy_id, self.slug)
        except StoreError as e:
            log.warning("Chargement %s/%s impossible : %s", self.academy_id, self.slug, e)
            self._notify("error", f"Failed to load page content: {e}")
            return False

        # Éditeur fermé pendant la requête → réponse périmée
        if self._closed:
            log.debug("Réponse ignorée pour %s/%s (éditeur fermé)", self.academy_id, self.slug)
            return False

        if record is not None:
            self.meta_description = record.meta_description
        if record is not None and record.content is not None:
            self.sections = SectionList(decode(record.content))
            self.is_default = False
        else:
            self.sections = SectionList(default_sections())
            self.is_default = True
        return True

    def save(self) -> SaveResult:
        """Encode la liste et remplace intégralement le blob (upsert tenant + slug)."""
        content = encode(self.sections)
        try:
            self.store.upsert(
                self.academy_id,
                self.slug,
                title=page_title_for_slug(self.slug),
                content=content,
                is_published=True,
                meta_description=self.meta_description,
            )
        except StoreError as e:
            log.warning("Sauvegarde %s/%s impossible : %s", self.academy_id, self.slug, e)
            self._notify("error", f"Failed to save content: {e}")
            return SaveResult(success=False, content=content, error=str(e))

        self.is_default = False
        self._notify("success", "Content saved successfully!")
        return SaveResult(success=True, content=content)

    def close(self):
        self._closed = True

    # ── Délégation vers la liste ─────────────────────────────────────────────

    def add(self, section_type: SectionType) -> Section:
        return self.sections.add(section_type)

    def update(self, section_id: str, partial: dict) -> Optional[Section]:
        return self.sections.update(section_id, partial)

    def remove(self, section_id: str) -> bool:
        return self.sections.remove(section_id)

    def move(self, section_id: str, direction: Direction) -> bool:
        return self.sections.move(section_id, direction)

    def set_visible(self, section_id: str, visible: bool) -> bool:
        return self.sections.set_visible(section_id, visible)
