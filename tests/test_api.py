"""
Tests API — édition des sections (GET / PUT / apply) + site public.
"""
import json

import pytest
from fastapi.testclient import TestClient


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def client(tmp_path, monkeypatch):
    """Client de test avec DB SQLite temporaire + une académie."""
    monkeypatch.setenv("DB_PATH", str(tmp_path / "test.db"))
    monkeypatch.delenv("SITE_BASE_URL", raising=False)

    from academy_site.api.main import app
    from academy_site.database import SessionLocal, init_db
    from academy_site.models import AcademyDB, TeamMemberDB
    init_db()

    with SessionLocal() as db:
        db.add(AcademyDB(id="acad-1", name="Falcons", subdomain="falcons",
                         contact_phone="+33 1 23 45", contact_email="hello@falcons.test"))
        db.add(TeamMemberDB(academy_id="acad-1", name="Coach Ana", position="Head coach", display_order=1))
        db.commit()

    with TestClient(app) as c:
        yield c


SECTIONS_URL = "/api/academies/acad-1/pages/homepage/sections"


# ── Catalogue ─────────────────────────────────────────────────────────────

def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_catalog(client):
    r = client.get("/api/sections/catalog")
    assert r.status_code == 200
    types = [t["type"] for t in r.json()["types"]]
    assert types == ["hero", "about", "features", "team", "gallery", "contact", "custom"]


# ── GET / PUT sections ────────────────────────────────────────────────────

class TestSections:
    def test_get_defaults_when_no_page(self, client):
        r = client.get(SECTIONS_URL)
        assert r.status_code == 200
        body = r.json()
        assert body["is_default"] is True
        assert [s["id"] for s in body["sections"]] == ["hero", "about", "features"]
        assert body["sections"][0]["isVisible"] is True

    def test_unknown_academy_404(self, client):
        assert client.get("/api/academies/nope/pages/homepage/sections").status_code == 404

    def test_save_then_reload(self, client):
        sections = client.get(SECTIONS_URL).json()["sections"]
        sections[1]["isVisible"] = False  # about masqué → supprimé du blob

        r = client.put(SECTIONS_URL, json={"sections": sections})
        body = r.json()
        assert body["success"] is True
        assert body["error"] is None
        assert "introduction" not in body["result"]["content"]
        assert body["result"]["content"]["hero_title"] == "Welcome to Our Academy"

        reloaded = client.get(SECTIONS_URL).json()
        assert reloaded["is_default"] is False
        assert [(s["id"], s["order"]) for s in reloaded["sections"]] == [("hero", 1), ("features", 2)]

    def test_save_is_full_replace(self, client):
        client.put(SECTIONS_URL, json={"sections": [
            {"id": "about", "type": "about", "content": {"introduction": "I", "mission": "M"}, "order": 1},
        ]})
        client.put(SECTIONS_URL, json={"sections": [
            {"id": "hero", "type": "hero", "content": {"title": "Only hero"}, "order": 1},
        ]})
        sections = client.get(SECTIONS_URL).json()["sections"]
        assert [s["type"] for s in sections] == ["hero"]

    def test_save_rejects_duplicate_ids(self, client):
        payload = {"sections": [
            {"id": "hero", "type": "hero", "order": 1},
            {"id": "hero", "type": "hero", "order": 2},
        ]}
        assert client.put(SECTIONS_URL, json=payload).status_code == 400

    def test_save_rejects_unknown_type(self, client):
        payload = {"sections": [{"id": "x", "type": "pricing", "order": 1}]}
        assert client.put(SECTIONS_URL, json=payload).status_code == 422


# ── apply ─────────────────────────────────────────────────────────────────

class TestApply:
    def _defaults(self, client):
        return client.get(SECTIONS_URL).json()["sections"]

    def test_add(self, client):
        r = client.post("/api/sections/apply", json={
            "sections": self._defaults(client), "op": "add", "type": "gallery",
        })
        sections = r.json()["sections"]
        assert len(sections) == 4
        assert sections[-1]["type"] == "gallery"
        assert sections[-1]["order"] == 4

    def test_move(self, client):
        r = client.post("/api/sections/apply", json={
            "sections": self._defaults(client), "op": "move", "id": "features", "direction": "up",
        })
        sections = r.json()["sections"]
        assert [(s["id"], s["order"]) for s in sections] == [("hero", 1), ("features", 2), ("about", 3)]

    def test_update_and_set_visible(self, client):
        sections = self._defaults(client)
        r = client.post("/api/sections/apply", json={
            "sections": sections, "op": "update", "id": "hero", "partial": {"title": "Bannière"},
        })
        sections = r.json()["sections"]
        assert sections[0]["title"] == "Bannière"

        r = client.post("/api/sections/apply", json={
            "sections": sections, "op": "set_visible", "id": "hero", "visible": False,
        })
        assert r.json()["sections"][0]["isVisible"] is False

    def test_remove(self, client):
        r = client.post("/api/sections/apply", json={
            "sections": self._defaults(client), "op": "remove", "id": "about",
        })
        assert [s["order"] for s in r.json()["sections"]] == [1, 3]

    def test_missing_arguments_400(self, client):
        sections = self._defaults(client)
        assert client.post("/api/sections/apply", json={"sections": sections, "op": "add"}).status_code == 400
        assert client.post("/api/sections/apply", json={
            "sections": sections, "op": "move", "id": "hero",
        }).status_code == 400

    def test_update_duplicate_id_400(self, client):
        r = client.post("/api/sections/apply", json={
            "sections": self._defaults(client), "op": "update", "id": "hero", "partial": {"id": "about"},
        })
        assert r.status_code == 400


# ── Site public ───────────────────────────────────────────────────────────

class TestPublicSite:
    def test_config(self, client):
        client.put(SECTIONS_URL, json={"sections": [
            {"id": "hero", "type": "hero", "content": {"title": "T", "subtitle": "Be the best"}, "order": 1},
        ]})
        body = client.get("/api/site/falcons/config").json()
        assert len(body["sections"]) == 7
        assert body["seo"]["title"] == "Falcons | Academy"
        assert body["seo"]["description"] == "Be the best"
        assert body["seo"]["canonical"] is None

    def test_config_canonical_from_env(self, client, monkeypatch):
        monkeypatch.setenv("SITE_BASE_URL", "https://academies.test/")
        body = client.get("/api/site/falcons/config").json()
        assert body["seo"]["canonical"] == "https://academies.test/site/falcons"

    def test_public_page_defaults(self, client):
        r = client.get("/site/falcons")
        assert r.status_code == 200
        assert "Welcome to Our Academy" in r.text
        assert "Coach Ana" in r.text
        assert "hello@falcons.test" in r.text
        assert "<title>Falcons | Academy</title>" in r.text

    def test_public_page_uses_saved_content(self, client):
        client.put(SECTIONS_URL, json={"sections": [
            {"id": "hero", "type": "hero", "content": {"title": "Saved hero"}, "order": 1},
        ]})
        r = client.get("/site/falcons")
        assert "Saved hero" in r.text
        assert "Welcome to Our Academy" not in r.text

    def test_non_string_subtitle_does_not_break_page(self, client):
        from academy_site.database import SessionLocal
        from academy_site.models import PublicPageDB

        with SessionLocal() as db:
            db.add(PublicPageDB(academy_id="acad-1", slug="homepage", title="Home",
                                content=json.dumps({"hero_title": "T", "hero_subtitle": 42})))
            db.commit()

        r = client.get("/site/falcons")
        assert r.status_code == 200
        assert '<meta name="description" content="Explore our programs and team.">' in r.text
        body = client.get("/api/site/falcons/config").json()
        assert body["seo"]["description"] == "Explore our programs and team."

    def test_meta_description_saved_and_used(self, client):
        r = client.put(SECTIONS_URL, json={
            "sections": [{"id": "hero", "type": "hero", "content": {"subtitle": "Sub"}, "order": 1}],
            "meta_description": "Falcons summer camps",
        })
        assert r.json()["success"] is True
        assert client.get(SECTIONS_URL).json()["meta_description"] == "Falcons summer camps"
        assert client.get("/api/site/falcons/config").json()["seo"]["description"] == "Falcons summer camps"
        assert '<meta name="description" content="Falcons summer camps">' in client.get("/site/falcons").text

    def test_public_page_organization_json_ld(self, client, monkeypatch):
        monkeypatch.setenv("SITE_BASE_URL", "https://academies.test")
        html = client.get("/site/falcons").text
        assert '<script type="application/ld+json">' in html
        assert '"@type": "Organization"' in html
        assert '"url": "https://academies.test/site/falcons"' in html
        assert '"email": "hello@falcons.test"' in html
        assert '"telephone": "+33 1 23 45"' in html

    def test_preview_repeated_type_uses_each_section(self, client):
        r = client.post("/api/site/falcons/preview", json={"sections": [
            {"id": "hero-a", "type": "hero", "content": {"title": "First banner"}, "order": 1},
            {"id": "hero-b", "type": "hero", "content": {"title": "Second banner"}, "order": 2},
        ]})
        html = r.text
        assert html.count("First banner") == 1
        assert html.count("Second banner") == 1
        assert 'id="home"' in html
        assert 'id="home-2"' in html

    def test_unknown_subdomain_404(self, client):
        assert client.get("/site/unknown").status_code == 404

    def test_preview_projects_edited_sections(self, client):
        r = client.post("/api/site/falcons/preview", json={"sections": [
            {"id": "contact-1", "type": "contact", "content": {}, "order": 1},
            {"id": "hero", "type": "hero", "content": {"title": "Draft", "subtitle": "Draft sub"}, "order": 2},
            {"id": "about", "type": "about", "content": {"introduction": "Hidden"}, "order": 3, "isVisible": False},
        ]})
        assert r.status_code == 200
        html = r.text
        assert html.index('id="contact"') < html.index('id="home"')
        assert "Draft" in html
        assert "Hidden" not in html
        assert 'id="team"' not in html
        assert '<meta name="description" content="Draft sub">' in html
