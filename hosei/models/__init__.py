"""データモデルパッケージ"""

from hosei.models.waza import Combo, Hosei, Waza

__all__ = [
    "Combo",
    "Hosei",
    "Waza",
]
