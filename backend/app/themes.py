"""
Rodrise School Management Backend — Theme Palette
==================================================

What:  The colour themes a user can pick for the dashboard shell.
How:   Each entry maps template slots (gradients, card, text) to CSS utility
       classes. Templates read the active entry as `theme_config`.
Who:   Read by the theme context provider and validated against by config.py.
"""

from typing import Dict

_LIGHT_CARD = {
    "card": "bg-white/95 backdrop-blur-md border-white/30",
    "card_text": "text-gray-900",
    "card_subtext": "text-gray-700",
}


def _palette(name: str, primary: str, secondary: str, accent: str, floating: tuple) -> Dict:
    return {
        "name": name,
        "primary": primary,
        "secondary": secondary,
        "accent": accent,
        "text": f"text-{accent}-200",
        "icon": f"text-{accent}-300",
        "placeholder": f"placeholder-{accent}-300",
        "floating": {"primary": floating[0], "secondary": floating[1]},
        **_LIGHT_CARD,
    }


THEMES: Dict[str, Dict] = {
    "cyan": _palette(
        "Ocean Blue", "from-cyan-500 via-teal-500 to-blue-600",
        "from-cyan-600 to-teal-600", "cyan", ("bg-cyan-500/15", "bg-teal-500/20"),
    ),
    "blue": _palette(
        "Classic Blue", "from-blue-600 via-indigo-600 to-purple-700",
        "from-blue-600 to-indigo-600", "blue", ("bg-blue-500/15", "bg-indigo-500/20"),
    ),
    "purple": _palette(
        "Royal Purple", "from-purple-600 via-pink-600 to-indigo-700",
        "from-purple-600 to-pink-600", "purple", ("bg-purple-500/15", "bg-pink-500/20"),
    ),
    "green": _palette(
        "Emerald Green", "from-green-600 via-emerald-600 to-teal-700",
        "from-green-600 to-emerald-600", "green", ("bg-green-500/15", "bg-emerald-500/20"),
    ),
    "orange": _palette(
        "Sunset Orange", "from-orange-500 via-red-500 to-pink-600",
        "from-orange-600 to-red-600", "orange", ("bg-orange-500/15", "bg-red-500/20"),
    ),
    "rose": _palette(
        "Rose Pink", "from-rose-500 via-pink-500 to-purple-600",
        "from-rose-600 to-pink-600", "rose", ("bg-rose-500/15", "bg-pink-500/20"),
    ),
    "dark": {
        "name": "Dark Mode",
        "primary": "from-gray-900 via-gray-800 to-black",
        "secondary": "from-gray-700 to-gray-800",
        "accent": "gray",
        "text": "text-gray-300",
        "icon": "text-gray-400",
        "placeholder": "placeholder-gray-400",
        "floating": {"primary": "bg-gray-500/10", "secondary": "bg-gray-600/15"},
        "card": "bg-gray-800/90 border-gray-700/50",
        "card_text": "text-gray-200",
        "card_subtext": "text-gray-400",
        "table": "bg-gray-800/90 border-gray-700/50",
        "table_header": "bg-gray-700/50 text-gray-200",
        "table_row": "border-gray-700/30 hover:bg-gray-700/30",
        "input": "bg-gray-800/90 border-gray-600/50 text-gray-200 placeholder-gray-500",
        "button": "bg-gray-700 hover:bg-gray-600 text-gray-200",
    },
}

DARK_THEME = "dark"
