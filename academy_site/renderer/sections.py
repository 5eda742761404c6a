"""
SectionMap par défaut — fonctions de rendu HTML des 7 sections publiques.

hero / about / features / gallery : contenu de la section référencée, sinon première visible du type
team    : membres de l'équipe du tenant
contact : identité du tenant
programs : bloc statique
"""
from html import escape
from typing import Any, Callable, Iterable, Mapping, Optional

from ..core.schemas import Section, SectionConfig


def _attr(obj: Any, name: str, default: Any = None) -> Any:
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _text(value: Any) -> str:
    return escape(str(value)) if value not in (None, "") else ""


def _items(value: Any) -> list:
    return value if isinstance(value, list) else []


# ── Renderers ───────────────────────────────────────────────────────────────

def render_hero(content: Optional[Mapping]) -> str:
    if not isinstance(content, Mapping):
        return ""
    bg = content.get("background_image")
    style = f' style="background-image:url(\'{escape(str(bg))}\')"' if bg else ""
    cta = ""
    if content.get("cta_text"):
        cta = (f'\n    <a href="{_text(content.get("cta_link")) or "#"}" class="hero__cta">'
               f'{_text(content.get("cta_text"))}</a>')
    description = f'\n    <p class="hero__description">{_text(content.get("description"))}</p>' if content.get("description") else ""
    return f"""<div class="hero"{style}>
  <div class="hero__content">
    <h1 class="hero__title">{_text(content.get("title"))}</h1>
    <p class="hero__subtitle">{_text(content.get("subtitle"))}</p>{description}{cta}
  </div>
</div>"""


def render_about(content: Optional[Mapping]) -> str:
    if not isinstance(content, Mapping):
        return ""
    parts = ['<h2 class="about__title">About Our Academy</h2>',
             f'<p class="about__intro">{_text(content.get("introduction"))}</p>']
    if content.get("mission"):
        parts.append(f'<h3>Our Mission</h3>\n<p>{_text(content["mission"])}</p>')
    if content.get("vision"):
        parts.append(f'<h3>Our Vision</h3>\n<p>{_text(content["vision"])}</p>')
    values = _items(content.get("values"))
    if values:
        items = "".join(f"<li>{_text(v)}</li>" for v in values)
        parts.append(f'<h3>Our Values</h3>\n<ul class="about__values">{items}</ul>')
    return '<div class="about">\n' + "\n".join(parts) + "\n</div>"


def render_features(content: Optional[Mapping]) -> str:
    if not isinstance(content, Mapping):
        return ""
    cards = ""
    for feature in _items(content.get("features")):
        cards += f"""<div class="features__card">
  <h3>{_text(_attr(feature, "title"))}</h3>
  <p>{_text(_attr(feature, "description"))}</p>
</div>"""
    return f"""<div class="features">
  <h2 class="features__title">{_text(content.get("title"))}</h2>
  <div class="features__grid">{cards}</div>
</div>"""


def render_gallery(content: Optional[Mapping]) -> str:
    if not isinstance(content, Mapping):
        return ""
    images = "".join(
        f'<img src="{_text(src)}" alt="" class="gallery__image">'
        for src in _items(content.get("images"))
    )
    return f"""<div class="gallery">
  <h2 class="gallery__title">{_text(content.get("title"))}</h2>
  <div class="gallery__grid">{images}</div>
</div>"""


def render_programs() -> str:
    return """<div class="programs">
  <h2 class="programs__title">Our Programs</h2>
</div>"""


def render_team(members: Iterable[Any]) -> str:
    members = list(members or [])
    if not members:
        return ""
    cards = ""
    for m in members:
        img = _attr(m, "image_url")
        img_html = f'<img src="{_text(img)}" alt="{_text(_attr(m, "name"))}">' if img else ""
        cards += f"""<div class="team__member">
  {img_html}
  <h3>{_text(_attr(m, "name"))}</h3>
  <p class="team__position">{_text(_attr(m, "position"))}</p>
  <p class="team__bio">{_text(_attr(m, "bio"))}</p>
</div>"""
    return f"""<div class="team">
  <h2 class="team__title">Our Team</h2>
  <div class="team__grid">{cards}</div>
</div>"""


def render_contact(academy: Any) -> str:
    lines = ""
    phone = _attr(academy, "contact_phone")
    email = _attr(academy, "contact_email")
    if phone:
        lines += f'\n  <p class="contact__phone">{_text(phone)}</p>'
    if email:
        lines += f'\n  <p class="contact__email"><a href="mailto:{_text(email)}">{_text(email)}</a></p>'
    return f"""<div class="contact">
  <h2 class="contact__title">Contact {_text(_attr(academy, "name"))}</h2>{lines}
</div>"""


# ── SectionMap ──────────────────────────────────────────────────────────────

def content_by_type(sections: Iterable[Section]) -> dict:
    """Contenu de la première section visible (par `order`) de chaque type."""
    result: dict = {}
    for section in sorted(sections, key=lambda s: s.order):
        if section.is_visible and section.type not in result:
            result[section.type] = section.content
    return result


def build_section_map(
    academy: Any,
    sections: Iterable[Section],
    team_members: Iterable[Any] = (),
) -> dict:
    """
    SectionMap complète (7 clés) pour un tenant et ses sections décodées.

    Une SectionConfig issue de la liste éditable (`section_id` renseigné) rend
    le contenu de sa propre section ; sinon, la première section visible du type.
    """
    sections = list(sections)
    contents = content_by_type(sections)
    by_id = {s.id: s.content for s in sections}
    members = list(team_members)

    def bind(fn: Callable, arg: Any) -> Callable[[SectionConfig], str]:
        return lambda config: fn(arg)

    def from_section(fn: Callable, section_type: str) -> Callable[[SectionConfig], str]:
        def render(config: SectionConfig) -> str:
            if config.section_id in by_id:
                return fn(by_id[config.section_id])
            return fn(contents.get(section_type))
        return render

    return {
        "hero":     from_section(render_hero, "hero"),
        "about":    from_section(render_about, "about"),
        "features": from_section(render_features, "features"),
        "programs": lambda config: render_programs(),
        "team":     bind(render_team, members),
        "gallery":  from_section(render_gallery, "gallery"),
        "contact":  bind(render_contact, academy),
    }
