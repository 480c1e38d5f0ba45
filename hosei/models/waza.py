"""Waza / Hosei DTOs.

This module provides immutable data transfer objects for combo actions
(waza) and their correction factors (hosei).
"""

from dataclasses import asdict, dataclass
from typing import Any

from hosei.constants import IDENTITY_HOSEI


@dataclass(frozen=True)
class Hosei:
    """Correction factors applied to a waza's damage.

    Only ``base`` is inferred; the other multipliers keep their identity
    value.

    Attributes:
        base: Base correction factor.
        first: Correction applied when the waza starts a combo.
        multi: Correction for multi-hit waza.
        bonus: Bonus multiplier.
        repeat: Correction for repeated use in the same combo.
    """

    base: float = IDENTITY_HOSEI
    first: float = IDENTITY_HOSEI
    multi: float = IDENTITY_HOSEI
    bonus: float = IDENTITY_HOSEI
    repeat: float = IDENTITY_HOSEI

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Waza:
    """Represents a single action inside a combo.

    Attributes:
        id: The waza identifier (unique within a combo).
        dm: The raw damage value.
        hs: Correction factors (None until the waza is selected as a
            combo starter).
    """

    id: str
    dm: int
    hs: Hosei | None = None

    def with_identity_hosei(self) -> "Waza":
        """全補正が1.0のHoseiを持つコピーを返す"""
        return Waza(id=self.id, dm=self.dm, hs=Hosei())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dm": self.dm,
            "hs": self.hs.to_dict() if self.hs is not None else None,
        }

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "Waza":
        """ローダーのレコードからWazaを生成する

        hsは読み込み時には常にNoneとする（推定対象外）。

        Raises:
            KeyError: id または dm がない場合
            TypeError: 値の型が不正な場合
            ValueError: dm が負の場合
        """
        waza_id = record["id"]
        dm = record["dm"]
        if not isinstance(waza_id, (str, int)) or isinstance(waza_id, bool):
            raise TypeError(f"Invalid waza id: {waza_id!r}")
        if not isinstance(dm, int) or isinstance(dm, bool):
            raise TypeError(f"Invalid dm for {waza_id}: {dm!r}")
        if dm < 0:
            raise ValueError(f"dm must be non-negative: {waza_id}={dm}")
        return cls(id=str(waza_id), dm=dm)


Combo = list[Waza]
