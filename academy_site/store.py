"""
Store des pages publiques — clé (academy_id, slug).

Écriture = upsert complet : le blob est remplacé en entier, pas de mise à
jour partielle, pas de version, dernier écrit gagnant.
"""
import json
import logging
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .core.schemas import ContentBlob
from .models import AcademyDB, PublicPageDB, TeamMemberDB

log = logging.getLogger(__name__)


class StoreError(Exception):
    """Échec d'accès au store (réseau, base, contrainte)."""


class PageRecord(BaseModel):
    academy_id: str
    slug: str
    title: str
    content: Optional[ContentBlob] = None
    is_published: bool = True
    meta_description: Optional[str] = None


@runtime_checkable
class PageStore(Protocol):
    def load(self, academy_id: str, slug: str) -> Optional[PageRecord]: ...
    def upsert(self, academy_id: str, slug: str, title: str,
               content: ContentBlob, is_published: bool = True,
               meta_description: Optional[str] = None) -> PageRecord: ...


def _load_blob(raw: Optional[str]) -> Optional[ContentBlob]:
    """JSON → dict ; un blob illisible ne bloque jamais le rendu."""
    if raw is None:
        return None
    try:
        blob = json.loads(raw)
    except ValueError:
        log.warning("Blob de contenu illisible, ignoré")
        return {}
    return blob if isinstance(blob, dict) else {}


class SqlPageStore:
    """Implémentation SQLAlchemy du store (une session par requête)."""

    def __init__(self, db: Session):
        self.db = db

    def load(self, academy_id: str, slug: str) -> Optional[PageRecord]:
        try:
            row = self.db.query(PublicPageDB).filter_by(academy_id=academy_id, slug=slug).first()
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        if row is None:
            return None
        return PageRecord(
            academy_id=row.academy_id,
            slug=row.slug,
            title=row.title,
            content=_load_blob(row.content),
            is_published=row.is_published,
            meta_description=row.meta_description,
        )

    def upsert(self, academy_id: str, slug: str, title: str,
               content: ContentBlob, is_published: bool = True,
               meta_description: Optional[str] = None) -> PageRecord:
        try:
            raw = json.dumps(content, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Contenu non sérialisable : {e}") from e
        try:
            row = self.db.query(PublicPageDB).filter_by(academy_id=academy_id, slug=slug).first()
            if row:
                row.title = title
                row.content = raw
                row.is_published = is_published
                row.meta_description = meta_description
                row.updated_at = datetime.utcnow()
            else:
                self.db.add(PublicPageDB(
                    academy_id=academy_id, slug=slug, title=title,
                    content=raw, is_published=is_published,
                    meta_description=meta_description,
                ))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e

        log.info("Page %s/%s sauvegardée (%d clés)", academy_id, slug, len(content))
        return PageRecord(academy_id=academy_id, slug=slug, title=title,
                          content=content, is_published=is_published,
                          meta_description=meta_description)

    # ── Lectures tenant ─────────────────────────────────────────────────────

    def get_academy(self, academy_id: str) -> Optional[AcademyDB]:
        try:
            return self.db.get(AcademyDB, academy_id)
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def get_academy_by_subdomain(self, subdomain: str) -> Optional[AcademyDB]:
        try:
            return self.db.query(AcademyDB).filter_by(subdomain=subdomain).first()
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def list_team_members(self, academy_id: str) -> List[TeamMemberDB]:
        try:
            return (self.db.query(TeamMemberDB)
                    .filter_by(academy_id=academy_id)
                    .order_by(TeamMemberDB.display_order)
                    .all())
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
