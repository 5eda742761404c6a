"""
Protocols du renderer — SectionMap pluggable + renderers de page interchangeables.
"""
from typing import Callable, Mapping, Optional, Protocol, runtime_checkable

from ..core.schemas import SectionConfig, SiteConfig

# Fonction de rendu d'une section : reçoit son descripteur, retourne du HTML
RenderFn = Callable[[SectionConfig], Optional[str]]

SectionMap = Mapping[str, RenderFn]


@runtime_checkable
class Renderer(Protocol):
    def render_page(self, site: SiteConfig, section_map: SectionMap) -> str: ...
