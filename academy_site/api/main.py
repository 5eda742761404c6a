"""
ACADEMY SITE — FastAPI app
Démarrer : uvicorn academy_site.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..router import router as site_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Academy Site — Composition des pages publiques", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    from ..database import db_path, init_db
    init_db()
    log.info("DB initialisée (SQLite : %s)", db_path())


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(site_router)
