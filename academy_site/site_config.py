"""
Configuration de rendu d'un site tenant : sections, thème, SEO.

Par défaut le squelette public est fixe (7 sections, même ordre pour tous les
tenants). Si la liste éditable est fournie, les SectionConfig en sont une
projection : sections visibles, triées par `order`, une ancre unique par
section (`gallery`, `gallery-2`…).
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .core.schemas import Organization, Section, SectionConfig, SeoMeta, SiteConfig, Theme
from .sections import get_kind

DEFAULT_THEME = Theme(background="bg-gray-50", text="text-gray-900")

DEFAULT_DESCRIPTION = "Explore our programs and team."

_SKELETON = (
    ("hero",     "full",      "home"),
    ("about",    "container", "about"),
    ("features", "container", "features"),
    ("programs", "container", "programs"),
    ("team",     "container", "team"),
    ("gallery",  "container", "gallery"),
    ("contact",  "centered",  "contact"),
)


def default_section_configs() -> List[SectionConfig]:
    return [SectionConfig(key=key, layout=layout, id=anchor) for key, layout, anchor in _SKELETON]


def section_configs_from_sections(sections: Iterable[Section]) -> List[SectionConfig]:
    """
    Projection de rendu de la liste éditable.

    Chaque SectionConfig référence sa section d'origine (`section_id`) ; les
    occurrences suivantes d'un même type reçoivent une ancre suffixée.
    """
    configs = []
    seen: Dict[str, int] = {}
    for section in sorted(sections, key=lambda s: s.order):
        if not section.is_visible:
            continue
        kind = get_kind(section.type)
        if kind is None or kind.render_key is None:
            continue
        anchor = kind.anchor
        if anchor:
            seen[anchor] = seen.get(anchor, 0) + 1
            if seen[anchor] > 1:
                anchor = f"{anchor}-{seen[anchor]}"
        configs.append(SectionConfig(
            key=kind.render_key, layout=kind.layout, id=anchor, section_id=section.id,
        ))
    return configs


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _tenant_attr(tenant: Any, name: str) -> Any:
    if tenant is None:
        return None
    if isinstance(tenant, Mapping):
        return tenant.get(name)
    return getattr(tenant, name, None)


def _tenant_name(tenant: Any) -> Optional[str]:
    return _tenant_attr(tenant, "name")


def _organization(tenant: Any, canonical_url: Optional[str]) -> Optional[Organization]:
    """Organization JSON-LD ; absente si le tenant n'a pas de nom."""
    name = _text_or_none(_tenant_name(tenant))
    if name is None:
        return None
    return Organization(
        name=name,
        url=canonical_url,
        email=_text_or_none(_tenant_attr(tenant, "contact_email")),
        telephone=_text_or_none(_tenant_attr(tenant, "contact_phone")),
        logo=_text_or_none(_tenant_attr(tenant, "logo_url")),
    )


def _hero_subtitle(content: Any) -> Optional[str]:
    """
    Sous-titre hero : forme imbriquée (content.hero.subtitle) ou blob plat.
    Toute valeur non textuelle est ignorée.
    """
    if not isinstance(content, Mapping):
        return None
    hero = content.get("hero")
    if isinstance(hero, Mapping) and _text_or_none(hero.get("subtitle")):
        return hero["subtitle"]
    return _text_or_none(content.get("hero_subtitle"))


def build_site_config(
    tenant: Any,
    content: Any,
    canonical_url: Optional[str] = None,
    sections: Optional[Iterable[Section]] = None,
    meta_description: Optional[str] = None,
) -> SiteConfig:
    """
    Construit la SiteConfig d'un tenant.

    Args:
        tenant: Académie (dict ou objet avec `name`, `contact_*`, `logo_url`)
        content: Blob de contenu sauvegardé (peut être vide ou None)
        canonical_url: URL canonique, transmise telle quelle
        sections: Liste éditable optionnelle ; sinon squelette fixe
        meta_description: Description SEO de la page, prioritaire sur le sous-titre hero

    Returns:
        SiteConfig (sections, thème, SEO + Organization)
    """
    name = _tenant_name(tenant)
    title = f"{name} | Academy" if name else "Academy"

    configs = (
        section_configs_from_sections(sections)
        if sections is not None
        else default_section_configs()
    )

    description = (
        _text_or_none(meta_description)
        or _hero_subtitle(content)
        or DEFAULT_DESCRIPTION
    )

    return SiteConfig(
        sections=configs,
        theme=DEFAULT_THEME.model_copy(),
        seo=SeoMeta(
            title=title,
            description=description,
            canonical=canonical_url,
            organization=_organization(tenant, canonical_url),
        ),
    )
