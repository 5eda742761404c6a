"""SQLite — init + session"""
import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .models import Base

DATA_DIR = Path(__file__).parent.parent / "data"

_ENGINES: dict = {}


def db_path() -> str:
    return os.getenv("DB_PATH", str(DATA_DIR / "academy_site.db"))


def get_engine():
    """Engine par chemin de base (DB_PATH lu à chaque appel, utile en test)."""
    path = db_path()
    if path not in _ENGINES:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        _ENGINES[path] = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})
    return _ENGINES[path]


def SessionLocal():
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())()


def init_db():
    Base.metadata.create_all(bind=get_engine())


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
