import pytest

from genlanding.models.spec import PrimaryColor, Section, Theme
from genlanding.renderer import (
    DEFAULT_BUTTON_TEXT,
    DEFAULT_DESCRIPTION,
    DEFAULT_FEATURE_ICON,
    DEFAULT_SUBTITLE,
    DEFAULT_TITLE,
    editable_fields,
    render_page,
    render_section,
    render_section_html,
)
from genlanding.themes import THEMES, tokens_for

AMBER = Theme(primary_color="amber")


def test_each_kind_gets_its_own_layout(coffee_spec):
    layouts = [render_section(section, coffee_spec.theme).layout for section in coffee_spec.sections]
    assert layouts == ["navbar.html", "hero.html", "features.html", "cta.html"]


def test_editable_fields_per_layout():
    views = {
        kind: render_section(Section(id=f"section-{kind.lower()}", type=kind, content={"title": "t"}), AMBER)
        for kind in ("NAVBAR", "HERO", "FEATURES", "CTA")
    }
    assert views["NAVBAR"].editable == ("title",)
    assert views["HERO"].editable == ("title", "description")
    assert views["FEATURES"].editable == ()
    assert views["CTA"].editable == ("title",)


def test_hero_falls_back_to_placeholders():
    section = Section(id="section-hero", type="HERO", content={"title": "Dawn roast"})

    view = render_section(section, AMBER)

    assert view.fields == {
        "subtitle": DEFAULT_SUBTITLE,
        "title": "Dawn roast",
        "description": DEFAULT_DESCRIPTION,
        "button_text": DEFAULT_BUTTON_TEXT,
    }
    assert DEFAULT_TITLE == "Brand Concept"


def test_cleared_fields_render_empty_instead_of_placeholders():
    section = Section(
        id="section-hero",
        type="HERO",
        content={"title": "", "description": "", "subtitle": "", "buttonText": ""},
    )

    view = render_section(section, AMBER)

    assert view.fields == {"subtitle": "", "title": "", "description": "", "button_text": ""}
    assert DEFAULT_TITLE not in render_section_html(view)


def test_features_render_at_most_three_items():
    items = [{"title": f"Feature {i}", "description": f"Detail {i}"} for i in range(5)]
    section = Section(id="section-features", type="FEATURES", content={"title": "F", "items": items})

    view = render_section(section, AMBER)
    html = render_section_html(view)

    assert [item.title for item in view.items] == ["Feature 0", "Feature 1", "Feature 2"]
    assert all(item.icon == DEFAULT_FEATURE_ICON for item in view.items)
    assert html.count("data-feature-index=") == 3
    assert "Feature 3" not in html


def test_features_without_items_render_empty_grid():
    section = Section(id="section-features", type="FEATURES", content={"title": "F"})
    assert render_section(section, AMBER).items == ()


def test_editable_markup_carries_section_and_field(coffee_spec):
    hero = coffee_spec.sections[1]
    html = render_section_html(render_section(hero, coffee_spec.theme))

    assert 'data-section-id="section-hero" data-field="title"' in html
    assert 'data-field="description"' in html
    assert 'data-action="regenerate"' in html
    assert THEMES[PrimaryColor.amber].bg in html


def test_regenerating_section_shows_loading_instead_of_refresh(coffee_spec):
    hero = coffee_spec.sections[1]
    view = render_section(hero, coffee_spec.theme, regenerating=True)
    html = render_section_html(view)

    assert view.can_regenerate is False
    assert "Updating Section..." in html
    assert 'data-action="regenerate"' not in html


def test_render_page_escapes_content_and_keeps_order(coffee_spec):
    html = render_page(coffee_spec, regenerating_ids={"section-cta"})

    positions = [html.index(f'id="section-{kind}"') for kind in ("navbar", "hero", "features", "cta")]
    assert positions == sorted(positions)
    assert "Ember &amp; Bean" in html
    assert html.count("Updating Section...") == 1


def test_unknown_theme_color_falls_back_to_indigo():
    assert tokens_for("magenta") == THEMES[PrimaryColor.indigo]
    assert tokens_for("rose") == THEMES[PrimaryColor.rose]


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        editable_fields("FOOTER")
