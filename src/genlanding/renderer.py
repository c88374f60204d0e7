from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Mapping

from jinja2 import DictLoader, Environment

from .models.spec import Section, SectionKind, Theme, UISpecification
from .themes import ThemeTokens, tokens_for

DEFAULT_TITLE = "Brand Concept"
DEFAULT_DESCRIPTION = "Strategic description for your high-end brand concept."
DEFAULT_SUBTITLE = "Premium Selection"
DEFAULT_BUTTON_TEXT = "Start Now"
DEFAULT_FEATURE_TITLE = "Innovation"
DEFAULT_FEATURE_ICON = "fa-sparkles"
MAX_FEATURES = 3


@dataclass(frozen=True)
class FeatureView:
    title: str
    description: str
    icon: str


@dataclass(frozen=True)
class SectionView:
    """What a layout needs to draw one section, and which fields it edits."""

    section_id: str
    kind: SectionKind
    layout: str
    tokens: ThemeTokens
    fields: Mapping[str, str] = field(default_factory=dict)
    editable: tuple[str, ...] = ()
    items: tuple[FeatureView, ...] = ()
    regenerating: bool = False

    @property
    def can_regenerate(self) -> bool:
        return not self.regenerating


def editable_fields(kind: SectionKind) -> tuple[str, ...]:
    if kind is SectionKind.navbar:
        return ("title",)
    if kind is SectionKind.hero:
        return ("title", "description")
    if kind is SectionKind.features:
        return ()
    if kind is SectionKind.cta:
        return ("title",)
    raise ValueError(f"Unsupported section kind: {kind!r}")


def render_section(section: Section, theme: Theme, *, regenerating: bool = False) -> SectionView:
    content = section.content
    title = DEFAULT_TITLE if content.title is None else content.title
    button_text = DEFAULT_BUTTON_TEXT if content.button_text is None else content.button_text
    kind = section.type
    common = dict(
        section_id=section.id,
        kind=kind,
        tokens=tokens_for(theme.primary_color),
        editable=editable_fields(kind),
        regenerating=regenerating,
    )

    if kind is SectionKind.navbar:
        return SectionView(
            layout="navbar.html",
            fields={"title": title, "button_text": button_text},
            **common,
        )
    if kind is SectionKind.hero:
        return SectionView(
            layout="hero.html",
            fields={
                "subtitle": DEFAULT_SUBTITLE if content.subtitle is None else content.subtitle,
                "title": title,
                "description": DEFAULT_DESCRIPTION if content.description is None else content.description,
                "button_text": button_text,
            },
            **common,
        )
    if kind is SectionKind.features:
        # The schema caps items at three, but responses are not trusted to honour it.
        items = tuple(
            FeatureView(
                title=item.title or DEFAULT_FEATURE_TITLE,
                description=item.description,
                icon=item.icon or DEFAULT_FEATURE_ICON,
            )
            for item in list(content.items or ())[:MAX_FEATURES]
        )
        return SectionView(layout="features.html", items=items, **common)
    if kind is SectionKind.cta:
        return SectionView(
            layout="cta.html",
            fields={"title": title, "button_text": button_text},
            **common,
        )
    raise ValueError(f"Unsupported section kind: {kind!r}")


_TEMPLATES = {
    "macros.html": """
{%- macro editable(view, name, label) -%}
{%- if name in view.editable %} contenteditable="true" role="textbox" aria-label="{{ label }}" data-section-id="{{ view.section_id }}" data-field="{{ name }}"{% endif -%}
{%- endmacro %}
""",
    "section.html": """
<div class="relative group min-h-[100px] border-b border-transparent hover:border-slate-100" id="{{ view.section_id }}" data-section-type="{{ view.kind.value }}">
  {%- if view.can_regenerate %}
  <button type="button" data-action="regenerate" data-section-id="{{ view.section_id }}" title="Refresh {{ view.kind.value }} Section" class="absolute top-8 right-8 z-50 bg-white/95 text-slate-900 text-[10px] font-black px-5 py-3 rounded-2xl border border-slate-100 uppercase">
    <i class="fa-solid fa-arrows-rotate {{ view.tokens.text }}"></i> Refresh
  </button>
  {%- else %}
  <div class="absolute inset-0 bg-white/70 backdrop-blur-md z-[45] flex flex-col items-center justify-center gap-4" data-state="regenerating">
    <div class="w-12 h-12 border-4 {{ view.tokens.text }} border-t-transparent rounded-full animate-spin"></div>
    <span class="text-[10px] font-black uppercase tracking-widest text-slate-400">Updating Section...</span>
  </div>
  {%- endif %}
  {% include view.layout %}
</div>
""",
    "navbar.html": """
{%- from "macros.html" import editable -%}
<nav class="sticky top-0 z-40 bg-white/90 border-b border-slate-100 p-4 md:px-12 flex justify-between items-center">
  <div class="text-xl md:text-2xl font-black flex items-center gap-2">
    <div class="w-8 h-8 {{ view.tokens.bg }} rounded-lg shadow-sm"></div>
    <span class="outline-none rounded px-1"{{ editable(view, "title", "Edit Brand Name") }}>{{ view.fields.title }}</span>
  </div>
  <button class="{{ view.tokens.bg }} {{ view.tokens.hover_bg }} text-white px-5 py-2.5 rounded-full text-sm font-bold shadow-lg {{ view.tokens.shadow }}">{{ view.fields.button_text }}</button>
</nav>
""",
    "hero.html": """
{%- from "macros.html" import editable -%}
<section class="relative pt-20 pb-28 md:pt-40 md:pb-48 px-6 text-center">
  <div class="max-w-5xl mx-auto relative z-10">
    <span class="inline-block px-4 py-1.5 {{ view.tokens.bg_soft }} {{ view.tokens.text }} rounded-full text-xs font-black uppercase mb-10">{{ view.fields.subtitle }}</span>
    <h1 class="text-5xl md:text-8xl font-black text-slate-900 mb-10 tracking-tighter outline-none"{{ editable(view, "title", "Edit Headline") }}>{{ view.fields.title }}</h1>
    <p class="text-lg md:text-2xl text-slate-500 mb-14 max-w-2xl mx-auto font-medium outline-none"{{ editable(view, "description", "Edit Description") }}>{{ view.fields.description }}</p>
    <button class="{{ view.tokens.bg }} {{ view.tokens.hover_bg }} text-white px-16 py-6 rounded-[2.5rem] text-xl font-black shadow-2xl {{ view.tokens.shadow }}">{{ view.fields.button_text }}</button>
  </div>
</section>
""",
    "features.html": """
<section class="py-24 md:py-40 px-6 bg-slate-50/50">
  <div class="max-w-7xl mx-auto grid grid-cols-1 md:grid-cols-3 gap-10 md:gap-14">
    {%- for item in view.items %}
    <div class="bg-white p-10 md:p-14 rounded-[3.5rem] shadow-sm border border-slate-100" data-feature-index="{{ loop.index0 }}">
      <div class="w-16 h-16 {{ view.tokens.bg_soft }} {{ view.tokens.text }} flex items-center justify-center rounded-2xl mb-10">
        <i class="fa-solid {{ item.icon }} text-2xl"></i>
      </div>
      <h3 class="text-2xl font-black mb-5 tracking-tight">{{ item.title }}</h3>
      <p class="text-slate-500 font-medium leading-relaxed">{{ item.description }}</p>
    </div>
    {%- endfor %}
  </div>
</section>
""",
    "cta.html": """
{%- from "macros.html" import editable -%}
<section class="py-16 md:py-32 px-6">
  <div class="{{ view.tokens.bg }} max-w-6xl mx-auto rounded-[4rem] p-14 md:p-28 text-center text-white shadow-2xl {{ view.tokens.shadow }}">
    <h2 class="text-4xl md:text-7xl font-black mb-12 tracking-tighter outline-none"{{ editable(view, "title", "Edit CTA Headline") }}>{{ view.fields.title }}</h2>
    <button class="bg-white text-slate-900 px-16 py-6 rounded-3xl text-xl font-black shadow-xl">{{ view.fields.button_text }}</button>
  </div>
</section>
""",
    "page.html": """
<div class="bg-white rounded-[5.5rem] overflow-hidden border border-slate-100/50" data-spec-name="{{ name }}">
{%- for view in views %}
{% include "section.html" %}
{%- endfor %}
</div>
""",
}

_env = Environment(loader=DictLoader(_TEMPLATES), autoescape=True)


def render_section_html(view: SectionView) -> str:
    return _env.get_template("section.html").render(view=view).strip()


def render_page(spec: UISpecification, *, regenerating_ids: Collection[str] = ()) -> str:
    """Render every section of ``spec`` in order as editable markup."""
    views = [
        render_section(section, spec.theme, regenerating=section.id in regenerating_ids)
        for section in spec.sections
    ]
    return _env.get_template("page.html").render(name=spec.name, views=views).strip()


__all__ = [
    "DEFAULT_BUTTON_TEXT",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_FEATURE_ICON",
    "DEFAULT_FEATURE_TITLE",
    "DEFAULT_SUBTITLE",
    "DEFAULT_TITLE",
    "FeatureView",
    "MAX_FEATURES",
    "SectionView",
    "editable_fields",
    "render_page",
    "render_section",
    "render_section_html",
]
