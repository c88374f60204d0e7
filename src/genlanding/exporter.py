from __future__ import annotations

from typing import Callable, Mapping

from .models.spec import Section, SectionKind, UISpecification


def escape(value: str | None) -> str:
    """Make ``value`` safe for a JSX text slot or attribute.

    Only double quotes and newlines are substituted; angle brackets and other
    markup characters pass through unchanged.
    """
    return (value or "").replace('"', "&quot;").replace("\n", " ")


def _navbar(section: Section) -> str:
    content = section.content
    return f"""<nav className="flex justify-between items-center py-8">
            <h1 className="text-2xl font-black">{escape(content.title)}</h1>
            <button className="bg-black text-white px-8 py-2 rounded-full font-bold">{escape(content.button_text)}</button>
          </nav>"""


def _hero(section: Section) -> str:
    content = section.content
    return f"""<section className="py-24 text-center">
            <h2 className="text-7xl font-black tracking-tighter">{escape(content.title)}</h2>
            <p className="mt-8 text-2xl text-gray-500 max-w-3xl mx-auto font-medium">{escape(content.description)}</p>
            <button className="mt-12 bg-black text-white px-12 py-5 rounded-[2rem] text-xl font-black">{escape(content.button_text)}</button>
          </section>"""


def _features(section: Section) -> str:
    cards = "\n            ".join(
        f"""<div className="p-12 border border-gray-100 rounded-[3rem] shadow-sm">
              <h3 className="text-2xl font-black">{escape(item.title)}</h3>
              <p className="mt-6 text-gray-500 leading-relaxed">{escape(item.description)}</p>
            </div>"""
        for item in section.content.items or ()
    )
    return f"""<section className="py-24 grid grid-cols-1 md:grid-cols-3 gap-12">
            {cards}
          </section>"""


def _cta(section: Section) -> str:
    content = section.content
    return f"""<section className="bg-black text-white p-24 rounded-[4rem] text-center">
            <h2 className="text-5xl font-black mb-12">{escape(content.title)}</h2>
            <button className="bg-white text-black px-12 py-5 rounded-3xl font-black text-xl">{escape(content.button_text)}</button>
          </section>"""


SECTION_TEMPLATES: Mapping[SectionKind, Callable[[Section], str]] = {
    SectionKind.navbar: _navbar,
    SectionKind.hero: _hero,
    SectionKind.features: _features,
    SectionKind.cta: _cta,
}


def export_section(section: Section) -> str:
    template = SECTION_TEMPLATES.get(section.type)
    return template(section) if template else ""


def export_markup(spec: UISpecification) -> str:
    """Serialize ``spec`` into a standalone React component."""
    body = "\n\n      ".join(export_section(section) for section in spec.sections)
    return f"""
import React from 'react';

/**
 * Landing Page Scaffold - Generated via GenLanding UI
 * Aesthetic: Tambo Standard
 */
export default function LandingPage() {{
  return (
    <div className="min-h-screen bg-white text-slate-900 px-6 max-w-7xl mx-auto font-sans">
      {body}
    </div>
  );
}}"""


__all__ = ["SECTION_TEMPLATES", "escape", "export_markup", "export_section"]
