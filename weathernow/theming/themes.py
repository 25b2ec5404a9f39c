"""Static theme table, one entry per classification key.

There is no fallback: the table must cover every ClassificationKey, which is
checked when this module is imported.
"""

from types import MappingProxyType

from weathernow.models.theme import ClassificationKey, Theme

THEMES = MappingProxyType({
    ClassificationKey.CLEAR: Theme(
        background_style="bg-gradient-to-b from-yellow-200 via-amber-300 to-sky-400",
        curve_color="#fffbeb",
        tooltip_style="bg-amber-500/80 text-white",
        favorite_button_style="bg-amber-400/30 border-amber-200/40",
    ),
    ClassificationKey.CLOUDY: Theme(
        background_style="bg-gradient-to-b from-slate-300 via-slate-400 to-sky-500",
        curve_color="#f1f5f9",
        tooltip_style="bg-slate-600/80 text-white",
        favorite_button_style="bg-slate-200/20 border-slate-100/30",
    ),
    ClassificationKey.RAIN: Theme(
        background_style="bg-gradient-to-b from-blue-400 via-sky-500 to-indigo-700",
        curve_color="#bae6fd",
        tooltip_style="bg-indigo-800/80 text-sky-50",
        favorite_button_style="bg-sky-300/20 border-sky-200/30",
    ),
    ClassificationKey.SNOW: Theme(
        background_style="bg-gradient-to-b from-slate-100 via-sky-100 to-blue-300",
        curve_color="#1e3a8a",
        tooltip_style="bg-white/80 text-blue-900",
        favorite_button_style="bg-white/40 border-blue-200/50",
    ),
    ClassificationKey.DAY: Theme(
        background_style="bg-gradient-to-b from-sky-200 to-indigo-400",
        curve_color="#ffffff",
        tooltip_style="bg-indigo-600/80 text-white",
        favorite_button_style="bg-white/10 border-white/20",
    ),
    ClassificationKey.NIGHT: Theme(
        background_style="bg-gradient-to-b from-slate-900 via-slate-800 to-indigo-900",
        curve_color="#c7d2fe",
        tooltip_style="bg-slate-700/90 text-indigo-50",
        favorite_button_style="bg-indigo-300/10 border-indigo-200/20",
    ),
})

_missing = set(ClassificationKey) - set(THEMES)
if _missing:
    raise RuntimeError(f"No theme defined for: {sorted(_missing)}")


def theme_for(key: ClassificationKey) -> Theme:
    return THEMES[key]
