"""始動技（base damage）の抽出と閉包チェック"""

import logging

from hosei.errors import ClosureViolationError
from hosei.models import Combo, Waza

logger = logging.getLogger(__name__)


def build_result_map(combos: list[Combo]) -> tuple[list[Combo], dict[str, Waza]]:
    """2技以上のコンボの始動技から結果マップを作る

    始動技ごとに全補正1.0のHoseiを持つWazaを1件登録する。
    同じ技が複数のコンボの始動技になっている場合は後のコンボの値で上書きする。

    コンボの2番目以降に出てくる技は、ダメージの基準値が必要なため
    どこかのコンボの始動技になっていなければならない。

    Args:
        combos: 読み込んだコンボのリスト（変更しない）

    Returns:
        (combos, 結果マップ) のタプル

    Raises:
        ClosureViolationError: 始動技になっていない技が2番目以降に出てくる場合
    """
    result: dict[str, Waza] = {}
    followers: set[str] = set()

    for combo in combos:
        if len(combo) <= 1:
            continue

        first_waza, *rest = combo
        previous = result.get(first_waza.id)
        if previous is not None and previous.dm != first_waza.dm:
            logger.warning(
                "Starter %s has conflicting dm (%d -> %d); keeping the latter",
                first_waza.id,
                previous.dm,
                first_waza.dm,
            )
        result[first_waza.id] = first_waza.with_identity_hosei()
        followers.update(waza.id for waza in rest)

    missing = [waza_id for waza_id in followers if waza_id not in result]
    if missing:
        raise ClosureViolationError(missing)

    logger.debug("Built result map with %d starters", len(result))
    return combos, result
