"""
Data models — Academy, PublicPage, TeamMember
SQLAlchemy (SQLite) + Pydantic v2 (payloads API)
"""
import uuid
from datetime import datetime
from typing import List, Literal, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .core.schemas import Section, SectionType


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class AcademyDB(Base):
    __tablename__ = "academies"
    id:            Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name:          Mapped[str]           = mapped_column(sa.String, nullable=False)
    subdomain:     Mapped[str]           = mapped_column(sa.String, unique=True, nullable=False)
    contact_phone: Mapped[Optional[str]] = mapped_column(sa.String)
    contact_email: Mapped[Optional[str]] = mapped_column(sa.String)
    logo_url:      Mapped[Optional[str]] = mapped_column(sa.String)


class PublicPageDB(Base):
    __tablename__ = "public_pages"
    __table_args__ = (sa.UniqueConstraint("academy_id", "slug", name="uq_public_pages_academy_slug"),)
    id:               Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    academy_id:       Mapped[str]           = mapped_column(sa.String, sa.ForeignKey("academies.id"), nullable=False, index=True)
    slug:             Mapped[str]           = mapped_column(sa.String, nullable=False)
    title:            Mapped[str]           = mapped_column(sa.String, nullable=False)
    content:          Mapped[str]           = mapped_column(sa.Text, default="{}")  # JSON blob plat
    is_published:     Mapped[bool]          = mapped_column(sa.Boolean, default=True)
    meta_description: Mapped[Optional[str]] = mapped_column(sa.String)  # prioritaire sur le sous-titre hero
    created_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)


class TeamMemberDB(Base):
    __tablename__ = "team_members"
    id:            Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    academy_id:    Mapped[str]           = mapped_column(sa.String, sa.ForeignKey("academies.id"), nullable=False, index=True)
    name:          Mapped[str]           = mapped_column(sa.String, nullable=False)
    position:      Mapped[Optional[str]] = mapped_column(sa.String)
    bio:           Mapped[Optional[str]] = mapped_column(sa.Text)
    image_url:     Mapped[Optional[str]] = mapped_column(sa.String)
    display_order: Mapped[int]           = mapped_column(sa.Integer, default=0)


# ── PYDANTIC (API) ─────────────────────────────────────────────────────

class SectionsSaveRequest(BaseModel):
    sections: List[Section] = Field(default_factory=list)
    meta_description: Optional[str] = None


class SectionOpRequest(BaseModel):
    """Une opération d'édition appliquée à une liste postée."""
    sections: List[Section] = Field(default_factory=list)
    op: Literal["add", "update", "remove", "move", "set_visible"]
    id: Optional[str] = None
    type: Optional[SectionType] = None
    partial: dict = Field(default_factory=dict)
    direction: Optional[Literal["up", "down"]] = None
    visible: Optional[bool] = None


class SitePreviewRequest(BaseModel):
    sections: List[Section] = Field(default_factory=list)
    canonical: Optional[str] = None
    meta_description: Optional[str] = None
