"""HoseiChecker - コンボデータからbase補正値を推定するサービス"""

import logging
from collections import Counter
from dataclasses import dataclass, replace
from pathlib import Path

from hosei.analyzers.candidates import FactorPair, candidate_pairs
from hosei.analyzers.closure import build_result_map
from hosei.analyzers.voting import count_votes, select_base_factor, to_base_hosei
from hosei.errors import DegenerateComboError
from hosei.loaders import load_combos
from hosei.models import Combo, Hosei, Waza

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoseiResult:
    """推定結果（イミュータブル）"""

    factor: int
    base_hosei: float
    votes: Counter
    entries: dict[str, Waza]


class HoseiChecker:
    """コンボデータからbase補正値を推定する

    構築時に始動技の閉包チェックを行い、calculate()で推定する。
    """

    def __init__(self, combos: list[Combo]):
        """初期化

        Args:
            combos: コンボのリスト

        Raises:
            ClosureViolationError: 始動技になっていない技がある場合
        """
        self._target, self._result = build_result_map(combos)

    @classmethod
    def from_path(cls, path: str | Path) -> "HoseiChecker":
        """YAMLファイルから読み込んで初期化する

        Raises:
            LoadError: ファイルの読み込みに失敗した場合
            ClosureViolationError: 始動技になっていない技がある場合
        """
        return cls(load_combos(path))

    @property
    def target(self) -> list[Combo]:
        return self._target

    @property
    def result(self) -> dict[str, Waza]:
        return self._result

    def collect_candidates(self) -> list[list[FactorPair]]:
        """2技以上の各コンボについて候補ペアを求める

        Raises:
            DegenerateComboError: 比率を計算できないコンボがある場合
        """
        candidates: list[list[FactorPair]] = []
        for combo_index, combo in enumerate(self._target):
            if len(combo) < 2:
                continue
            try:
                pairs = candidate_pairs(combo)
            except DegenerateComboError as exc:
                raise DegenerateComboError(
                    f"コンボ#{combo_index}: {exc}", combo_index=combo_index
                ) from exc
            logger.debug(
                "combo #%d (%s -> %s): %d candidate pairs",
                combo_index,
                combo[0].id,
                combo[1].id,
                len(pairs),
            )
            candidates.append(pairs)
        return candidates

    def calculate(self) -> HoseiResult:
        """base補正値を推定し、結果マップの全エントリに反映する

        Returns:
            推定結果

        Raises:
            DegenerateComboError: 比率を計算できないコンボがある場合
            NoInferenceError: 候補が1つも得られない場合
        """
        votes = count_votes(self.collect_candidates())
        factor = select_base_factor(votes)
        base_hosei = to_base_hosei(factor)
        logger.info(
            "Selected factor %d (%d votes) -> base hosei %s",
            factor,
            votes[factor],
            base_hosei,
        )

        self._result = {
            waza_id: replace(waza, hs=replace(waza.hs or Hosei(), base=base_hosei))
            for waza_id, waza in self._result.items()
        }

        return HoseiResult(
            factor=factor,
            base_hosei=base_hosei,
            votes=votes,
            entries=dict(self._result),
        )
