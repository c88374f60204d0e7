from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .models.spec import PrimaryColor


@dataclass(frozen=True)
class ThemeTokens:
    bg: str
    text: str
    ring: str
    shadow: str
    bg_soft: str
    hover_bg: str


THEMES: Mapping[PrimaryColor, ThemeTokens] = {
    PrimaryColor.indigo: ThemeTokens(
        bg="bg-indigo-600",
        text="text-indigo-600",
        ring="ring-indigo-100",
        shadow="shadow-indigo-200",
        bg_soft="bg-indigo-50",
        hover_bg="hover:bg-indigo-700",
    ),
    PrimaryColor.sky: ThemeTokens(
        bg="bg-sky-500",
        text="text-sky-600",
        ring="ring-sky-100",
        shadow="shadow-sky-200",
        bg_soft="bg-sky-50",
        hover_bg="hover:bg-sky-600",
    ),
    PrimaryColor.rose: ThemeTokens(
        bg="bg-rose-500",
        text="text-rose-600",
        ring="ring-rose-100",
        shadow="shadow-rose-200",
        bg_soft="bg-rose-50",
        hover_bg="hover:bg-rose-600",
    ),
    PrimaryColor.emerald: ThemeTokens(
        bg="bg-emerald-600",
        text="text-emerald-600",
        ring="ring-emerald-100",
        shadow="shadow-emerald-200",
        bg_soft="bg-emerald-50",
        hover_bg="hover:bg-emerald-700",
    ),
    PrimaryColor.amber: ThemeTokens(
        bg="bg-amber-500",
        text="text-amber-600",
        ring="ring-amber-100",
        shadow="shadow-amber-200",
        bg_soft="bg-amber-50",
        hover_bg="hover:bg-amber-600",
    ),
    PrimaryColor.slate: ThemeTokens(
        bg="bg-slate-900",
        text="text-slate-900",
        ring="ring-slate-100",
        shadow="shadow-slate-200",
        bg_soft="bg-slate-50",
        hover_bg="hover:bg-black",
    ),
}

DEFAULT_COLOR = PrimaryColor.indigo


def tokens_for(color: PrimaryColor | str) -> ThemeTokens:
    """Look up the class tokens for ``color``, falling back to indigo."""
    try:
        return THEMES[PrimaryColor(color)]
    except ValueError:
        return THEMES[DEFAULT_COLOR]


__all__ = ["DEFAULT_COLOR", "THEMES", "ThemeTokens", "tokens_for"]
