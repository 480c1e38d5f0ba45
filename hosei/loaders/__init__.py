"""Loaders module"""

from hosei.loaders.combo_loader import load_combos, parse_combos

__all__ = [
    "load_combos",
    "parse_combos",
]
