"""
Codec ContentBlob ⇄ Sections.

decode : blob plat persisté → liste ordonnée de Section (éditeur)
encode : liste de Section → blob plat (sauvegarde)

Les deux sens passent par la table de champs de chaque SectionKind.
Total sur les entrées partielles ou malformées : jamais d'exception.
"""
import copy
import logging
from typing import Any, Iterable, List, Mapping

from .core.schemas import ContentBlob, Section
from .sections import STARTER_TYPES, SectionKind, decode_kinds, get_kind

log = logging.getLogger(__name__)


def _coerce(value: Any, empty: Any) -> Any:
    """Aligne une valeur du blob sur la forme attendue ("" ou [])."""
    if value is None:
        return copy.deepcopy(empty)
    if isinstance(empty, list):
        return copy.deepcopy(value) if isinstance(value, list) else []
    if isinstance(empty, str) and not isinstance(value, str):
        # 0, False, {}, [] → "" (jamais "0" ni "False")
        if not value or isinstance(value, (dict, list)):
            return ""
        return str(value)
    return copy.deepcopy(value)


def _has_marker(kind: SectionKind, blob: Mapping) -> bool:
    return any(blob.get(marker) for marker in kind.markers)


def _decode_content(kind: SectionKind, blob: Mapping) -> dict:
    content = kind.empty_content()
    content.update(copy.deepcopy(kind.decode_extras))
    for field, key in kind.field_map.items():
        content[field] = _coerce(blob.get(key), kind.empty.get(field, ""))
    return content


def decode(blob: Any) -> List[Section]:
    """
    Convertit un blob persisté en sections éditables.

    Un groupe (hero, features, about — dans cet ordre) n'est matérialisé que si
    au moins un de ses champs marqueurs est non vide. Les groupes absents ne
    produisent rien, pas même une section masquée.
    """
    if not isinstance(blob, Mapping):
        if blob is not None:
            log.warning("decode: blob ignoré (type %s)", type(blob).__name__)
        blob = {}

    sections = []
    for kind in decode_kinds():
        if not _has_marker(kind, blob):
            continue
        sections.append(Section(
            id=kind.type,
            type=kind.type,
            title=kind.label,
            content=_decode_content(kind, blob),
            is_visible=True,
            order=kind.decode_order,
        ))
    return sections


def encode(sections: Iterable[Section]) -> ContentBlob:
    """
    Aplatit les sections visibles en blob, dans l'ordre de la liste.

    Une section masquée ne contribue rien : ses données disparaissent du blob
    sauvegardé. En cas de collision de clés, la dernière section l'emporte.
    """
    blob: ContentBlob = {}
    for section in sections:
        if not section.is_visible:
            continue
        kind = get_kind(section.type)
        if kind is None or not kind.persisted:
            continue
        if not isinstance(section.content, Mapping):
            log.debug("encode: contenu non exploitable pour %s", section.id)
            continue
        for field, key in kind.field_map.items():
            if field in section.content:
                blob[key] = copy.deepcopy(section.content[field])
    return blob


def default_sections() -> List[Section]:
    """Page de démarrage (hero, about, features), utilisée quand aucun blob n'existe."""
    sections = []
    for order, section_type in enumerate(STARTER_TYPES, 1):
        kind = get_kind(section_type)
        sections.append(Section(
            id=kind.type,
            type=kind.type,
            title=kind.label,
            content=kind.seed_content(),
            is_visible=True,
            order=order,
        ))
    return sections
