"""
Router FastAPI — édition des sections + site public.

GET  /api/sections/catalog                              → types de section + contenus par défaut
GET  /api/academies/{academy_id}/pages/{slug}/sections  → sections décodées (ou page de démarrage)
PUT  /api/academies/{academy_id}/pages/{slug}/sections  → encode + upsert
POST /api/sections/apply                                → applique une opération à une liste postée
GET  /api/site/{subdomain}/config                       → SiteConfig JSON
POST /api/site/{subdomain}/preview                      → HTML des sections en cours d'édition
GET  /site/{subdomain}                                  → page publique HTML
"""
import logging
import os

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .codec import decode, default_sections, encode
from .database import get_db
from .editor import PageEditor, SectionList
from .models import SectionOpRequest, SectionsSaveRequest, SitePreviewRequest
from .renderer.html import render_document
from .renderer.sections import build_section_map
from .sections import section_catalog
from .site_config import build_site_config
from .store import SqlPageStore, StoreError

log = logging.getLogger(__name__)
router = APIRouter(tags=["Site"])

HOMEPAGE_SLUG = "homepage"


def _dump(sections) -> list:
    return [s.model_dump(by_alias=True) for s in sections]


def _canonical(subdomain: str):
    base = os.getenv("SITE_BASE_URL", "")
    return f"{base.rstrip('/')}/site/{subdomain}" if base else None


def _require_academy(store: SqlPageStore, academy_id: str):
    try:
        academy = store.get_academy(academy_id)
    except StoreError as e:
        raise HTTPException(503, f"Store indisponible : {e}")
    if academy is None:
        raise HTTPException(404, "Académie introuvable")
    return academy


# ── Éditeur ────────────────────────────────────────────────────────────────────

@router.get("/api/sections/catalog")
def sections_catalog() -> JSONResponse:
    return JSONResponse({"types": section_catalog()})


@router.get("/api/academies/{academy_id}/pages/{slug}/sections")
def get_sections(academy_id: str, slug: str, db: Session = Depends(get_db)):
    """Sections éditables d'une page ; page de démarrage si aucun blob n'existe."""
    store = SqlPageStore(db)
    _require_academy(store, academy_id)

    editor = PageEditor(store, academy_id, slug)
    if not editor.load():
        _, message = editor.notifications[-1]
        raise HTTPException(503, message)
    return {
        "sections": _dump(editor.sections),
        "meta_description": editor.meta_description,
        "is_default": editor.is_default,
    }


@router.put("/api/academies/{academy_id}/pages/{slug}/sections")
def save_sections(academy_id: str, slug: str, req: SectionsSaveRequest,
                  db: Session = Depends(get_db)):
    """Sauvegarde complète : les sections masquées disparaissent du blob."""
    store = SqlPageStore(db)
    _require_academy(store, academy_id)

    ids = [s.id for s in req.sections]
    if len(ids) != len(set(ids)):
        raise HTTPException(400, "Identifiants de section dupliqués")

    editor = PageEditor(store, academy_id, slug)
    editor.sections = SectionList(req.sections)
    editor.meta_description = req.meta_description
    result = editor.save()
    return {
        "success": result.success,
        "result": {"academy_id": academy_id, "slug": slug, "content": result.content},
        "message": "Content saved successfully!" if result.success else "Failed to save content",
        "error": result.error,
    }


@router.post("/api/sections/apply")
def apply_operation(req: SectionOpRequest):
    """Applique une opération de liste et retourne la liste résultante."""
    sections = SectionList(req.sections)
    try:
        if req.op == "add":
            if req.type is None:
                raise HTTPException(400, "type requis pour add")
            sections.add(req.type)
        elif req.op == "update":
            sections.update(req.id, req.partial)
        elif req.op == "remove":
            sections.remove(req.id)
        elif req.op == "move":
            if req.direction is None:
                raise HTTPException(400, "direction requise pour move")
            sections.move(req.id, req.direction)
        elif req.op == "set_visible":
            if req.visible is None:
                raise HTTPException(400, "visible requis pour set_visible")
            sections.set_visible(req.id, req.visible)
    except (ValidationError, ValueError) as e:
        raise HTTPException(400, str(e))
    return {"sections": _dump(sections)}


# ── Site public ────────────────────────────────────────────────────────────────

def _load_public(store: SqlPageStore, subdomain: str):
    try:
        academy = store.get_academy_by_subdomain(subdomain)
        if academy is None:
            raise HTTPException(404, "Académie introuvable")
        record = store.load(academy.id, HOMEPAGE_SLUG)
        team = store.list_team_members(academy.id)
    except StoreError as e:
        raise HTTPException(503, f"Store indisponible : {e}")

    blob = record.content if record is not None and record.content is not None else None
    sections = decode(blob) if blob is not None else default_sections()
    meta_description = record.meta_description if record is not None else None
    return academy, blob or {}, sections, team, meta_description


@router.get("/api/site/{subdomain}/config")
def site_config(subdomain: str, db: Session = Depends(get_db)):
    academy, blob, _, _, meta_description = _load_public(SqlPageStore(db), subdomain)
    site = build_site_config(academy, blob, _canonical(subdomain), meta_description=meta_description)
    return site.model_dump()


@router.post("/api/site/{subdomain}/preview", response_class=HTMLResponse)
def site_preview(subdomain: str, req: SitePreviewRequest, db: Session = Depends(get_db)):
    """Aperçu des sections non sauvegardées : les SectionConfig sont projetées depuis la liste."""
    academy, _, _, team, saved_description = _load_public(SqlPageStore(db), subdomain)
    site = build_site_config(
        academy, encode(req.sections), req.canonical,
        sections=req.sections,
        meta_description=req.meta_description or saved_description,
    )
    section_map = build_section_map(academy, req.sections, team)
    return HTMLResponse(render_document(site, section_map))


@router.get("/site/{subdomain}", response_class=HTMLResponse)
def public_site(subdomain: str, db: Session = Depends(get_db)):
    academy, blob, sections, team, meta_description = _load_public(SqlPageStore(db), subdomain)
    site = build_site_config(academy, blob, _canonical(subdomain), meta_description=meta_description)
    section_map = build_section_map(academy, sections, team)
    return HTMLResponse(render_document(site, section_map))
