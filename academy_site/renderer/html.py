"""
Renderer HTML — compose la page publique à partir des SectionConfig.

Chaque section est résolue via la SectionMap fournie par l'hôte, puis
enveloppée dans son layout. Clé absente de la map → section omise, sans erreur.
"""
import json
import logging
from html import escape
from typing import Iterable, Optional

from ..core.schemas import LayoutType, Organization, SectionConfig, SiteConfig, Theme
from .base import SectionMap

log = logging.getLogger(__name__)

# Padding vertical identique pour tous les layouts
SECTION_PADDING = "py-12"
CONTAINER_CLASS = "container mx-auto px-6"


def _classes(*parts: Optional[str]) -> str:
    return " ".join(p for p in parts if p)


def with_layout(inner: str, layout: LayoutType = "container", anchor: Optional[str] = None) -> str:
    """
    Enveloppe de layout :
      full      → pleine largeur, padding vertical seul
      container → largeur contrainte
      centered  → container + texte centré
    """
    container = "" if layout == "full" else CONTAINER_CLASS
    align = "text-center" if layout == "centered" else None
    id_attr = f' id="{escape(anchor)}"' if anchor else ""
    return (
        f'<section{id_attr} class="{_classes(SECTION_PADDING, align)}">\n'
        f'  <div class="{container}">\n{inner}\n  </div>\n'
        f'</section>'
    )


def render_sections(
    sections: Iterable[SectionConfig],
    section_map: SectionMap,
    theme: Optional[Theme] = None,
) -> str:
    """Rend les sections dans l'ordre de la liste, thème appliqué une fois à la racine."""
    parts = []
    for config in sections:
        render = section_map.get(config.key)
        if render is None:
            log.debug("Section %r sans renderer, ignorée", config.key)
            continue
        inner = render(config) or ""
        parts.append(with_layout(inner, layout=config.layout, anchor=config.id))

    root_class = _classes(theme.background, theme.text) if theme else ""
    body = "\n".join(parts)
    return f'<div class="{root_class}">\n{body}\n</div>'


def organization_json_ld(org: Optional[Organization]) -> str:
    """Balise <script> schema.org Organization ; champs vides omis."""
    if org is None:
        return ""
    data = {"@context": "https://schema.org", "@type": "Organization"}
    data.update(org.model_dump(exclude_none=True))
    # "</" ne doit jamais fermer la balise script
    payload = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'


def render_document(site: SiteConfig, section_map: SectionMap, lang: str = "en",
                    extra_head: str = "") -> str:
    """Génère le document HTML complet (SEO + sections composées)."""
    seo = site.seo
    description = f'<meta name="description" content="{escape(seo.description)}">' if seo.description else ""
    canonical = f'<link rel="canonical" href="{escape(seo.canonical)}">' if seo.canonical else ""
    json_ld = organization_json_ld(seo.organization)

    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(seo.title)}</title>
  {description}
  {canonical}
  {json_ld}
  {extra_head}
</head>
<body>
{render_sections(site.sections, section_map, site.theme)}
</body>
</html>"""


class HtmlRenderer:
    """Renderer HTML conforme au protocol `Renderer`."""

    def __init__(self, lang: str = "en"):
        self.lang = lang

    def render_page(self, site: SiteConfig, section_map: SectionMap) -> str:
        return render_document(site, section_map, lang=self.lang)
