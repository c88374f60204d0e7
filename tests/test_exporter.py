from genlanding.exporter import escape, export_markup, export_section
from genlanding.models.spec import Section


def test_escape_substitutes_quotes_and_newlines_only():
    assert escape('Say "hi"\nthere') == "Say &quot;hi&quot; there"
    assert escape("<b>bold</b> & more") == "<b>bold</b> & more"
    assert escape(None) == ""


def test_export_contains_every_section_in_order(coffee_spec):
    markup = export_markup(coffee_spec)

    assert markup.startswith("\nimport React from 'react';")
    assert "export default function LandingPage() {" in markup
    positions = [
        markup.index("<nav "),
        markup.index("Small-batch coffee, roasted at dawn"),
        markup.index("Roasted Daily"),
        markup.index("Your next favourite cup is waiting"),
    ]
    assert positions == sorted(positions)
    assert markup.count('rounded-[3rem] shadow-sm') == 3
    assert markup.rstrip().endswith("}")


def test_export_escapes_values():
    section = Section(
        id="section-cta",
        type="CTA",
        content={"title": 'The "best"\ncup', "buttonText": "Go"},
    )

    assert '<h2 className="text-5xl font-black mb-12">The &quot;best&quot; cup</h2>' in export_section(section)


def test_missing_optional_values_export_as_empty_strings():
    section = Section(id="section-navbar", type="NAVBAR", content={"title": "Brand"})

    assert '<button className="bg-black text-white px-8 py-2 rounded-full font-bold"></button>' in export_section(section)
