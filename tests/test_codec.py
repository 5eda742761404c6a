"""Tests codec — decode / encode / default_sections."""
import pytest

from academy_site.codec import decode, default_sections, encode
from academy_site.core.schemas import Section


# ── decode ────────────────────────────────────────────────────────────────────

def test_decode_hero_and_features_only():
    sections = decode({"hero_title": "Welcome", "features": [{"title": "A", "description": "B"}]})
    assert [s.type for s in sections] == ["hero", "features"]

    hero, features = sections
    assert hero.id == "hero"
    assert hero.order == 1
    assert hero.content["title"] == "Welcome"
    assert hero.content["subtitle"] == ""
    assert features.order == 2
    assert features.content["features"] == [{"title": "A", "description": "B"}]
    assert features.content["title"] == "Our Features"


def test_decode_full_blob_order():
    blob = {
        "hero_subtitle": "Sub",
        "introduction": "Intro",
        "values": ["Excellence"],
        "features": [{"title": "F", "description": "D"}],
    }
    sections = decode(blob)
    assert [(s.type, s.order) for s in sections] == [("hero", 1), ("features", 2), ("about", 3)]
    assert all(s.is_visible for s in sections)
    about = sections[2]
    assert about.title == "About Section"
    assert about.content == {"introduction": "Intro", "mission": "", "vision": "", "values": ["Excellence"]}


def test_decode_about_from_mission_only():
    sections = decode({"mission": "M"})
    assert len(sections) == 1
    assert sections[0].type == "about"
    assert sections[0].order == 3


def test_decode_ignores_groups_without_markers():
    # vision / values seuls ne sont pas des marqueurs
    assert decode({"vision": "V", "values": ["x"], "cta_text": "Go"}) == []


def test_decode_empty_features_list_not_a_marker():
    assert decode({"features": []}) == []


@pytest.mark.parametrize("blob", [None, {}, "garbage", 42, ["hero_title"]])
def test_decode_total_on_malformed_input(blob):
    assert decode(blob) == []


def test_decode_wrong_types_degrade_to_defaults():
    sections = decode({"hero_title": 12, "introduction": "I", "values": "not-a-list"})
    hero = sections[0]
    about = sections[1]
    assert hero.content["title"] == "12"
    assert about.content["values"] == []


def test_decode_falsy_scalars_become_empty_strings():
    sections = decode({"hero_title": "T", "hero_subtitle": 0, "cta_text": False, "cta_link": {}})
    hero = sections[0]
    assert hero.content["subtitle"] == ""
    assert hero.content["cta_text"] == ""
    assert hero.content["cta_link"] == ""
    assert hero.content["title"] == "T"


def test_decode_does_not_alias_blob_lists():
    blob = {"features": [{"title": "A", "description": "B"}]}
    sections = decode(blob)
    sections[0].content["features"].append({"title": "C", "description": "D"})
    assert len(blob["features"]) == 1


# ── encode ────────────────────────────────────────────────────────────────────

def test_encode_flattens_visible_sections():
    blob = encode(default_sections())
    assert blob["hero_title"] == "Welcome to Our Academy"
    assert blob["hero_background"] == ""
    assert blob["cta_link"] == "#contact"
    assert blob["values"] == ["Excellence", "Integrity", "Teamwork"]
    assert len(blob["features"]) == 3
    # le titre features n'est pas persisté
    assert "title" not in blob


def test_encode_drops_hidden_section_data():
    sections = default_sections()
    sections[1].is_visible = False  # about
    blob = encode(sections)
    for key in ("introduction", "mission", "vision", "values"):
        assert key not in blob
    assert "hero_title" in blob


def test_encode_skips_types_without_field_map():
    sections = [
        Section(id="g", type="gallery", content={"title": "G", "images": ["a.jpg"]}, order=1),
        Section(id="c", type="contact", content={"title": "C"}, order=2),
        Section(id="x", type="custom", content={"anything": 1}, order=3),
    ]
    assert encode(sections) == {}


def test_encode_only_writes_present_fields():
    blob = encode([Section(id="hero", type="hero", content={"title": "Only"}, order=1)])
    assert blob == {"hero_title": "Only"}


def test_encode_malformed_content_contributes_nothing():
    sections = [
        Section(id="hero", type="hero", content="not a dict", order=1),
        Section(id="about", type="about", content={"introduction": "I"}, order=2),
    ]
    assert encode(sections) == {"introduction": "I"}


def test_encode_last_section_wins_on_collision():
    sections = [
        Section(id="hero-1", type="hero", content={"title": "First"}, order=1),
        Section(id="hero-2", type="hero", content={"title": "Second"}, order=2),
    ]
    assert encode(sections)["hero_title"] == "Second"


# ── Round-trip ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("blob", [
    {"hero_title": "Welcome", "features": [{"title": "A", "description": "B"}]},
    {"hero_subtitle": "S", "cta_text": "Go", "cta_link": "#c"},
    {"introduction": "I", "mission": "M", "vision": "V", "values": ["x", "y"]},
    {"hero_title": "T", "hero_background": "/bg.jpg", "mission": "M"},
])
def test_round_trip_preserves_non_empty_fields(blob):
    result = encode(decode(blob))
    for key, value in blob.items():
        assert result[key] == value


# ── default_sections ──────────────────────────────────────────────────────────

def test_default_sections_first_entry():
    hero = default_sections()[0]
    assert hero.id == "hero"
    assert hero.type == "hero"
    assert hero.order == 1
    assert hero.is_visible is True
    assert hero.content["title"] == "Welcome to Our Academy"


def test_default_sections_order_differs_from_decode():
    assert [(s.type, s.order) for s in default_sections()] == [("hero", 1), ("about", 2), ("features", 3)]


def test_default_sections_idempotent():
    a = default_sections()
    b = default_sections()
    assert [s.model_dump() for s in a] == [s.model_dump() for s in b]
    a[0].content["title"] = "Changed"
    assert default_sections()[0].content["title"] == "Welcome to Our Academy"
