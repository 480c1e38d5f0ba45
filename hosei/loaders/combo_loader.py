"""コンボ定義YAMLの読み込み

トップレベルは「コンボのリスト」、各コンボは ``{id, dm}`` のリスト。

    - - {id: A, dm: 100}
      - {id: B, dm: 250}
    - - {id: B, dm: 150}
"""

import logging
from pathlib import Path

import yaml

from hosei.errors import LoadError
from hosei.models import Combo, Waza

logger = logging.getLogger(__name__)


def load_combos(path: str | Path) -> list[Combo]:
    """YAMLファイルからコンボのリストを読み込む

    Args:
        path: コンボ定義ファイルのパス

    Returns:
        コンボのリスト（ファイル内の順序を保持）

    Raises:
        LoadError: ファイルが存在しない・読めない・形式が不正な場合
    """
    combo_path = Path(path)
    try:
        with combo_path.open("r", encoding="utf-8") as fp:
            payload = fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"コンボファイルを読み込めません: {combo_path} ({exc})", str(combo_path)) from exc

    combos = parse_combos(payload, source=str(combo_path))
    logger.info("Loaded %d combos from %s", len(combos), combo_path)
    return combos


def parse_combos(payload: str, source: str = "<string>") -> list[Combo]:
    """YAML文字列をコンボのリストに変換する

    Args:
        payload: YAML文字列
        source: エラーメッセージ用の読み込み元

    Returns:
        コンボのリスト

    Raises:
        LoadError: YAMLとして不正、または構造が不正な場合
    """
    try:
        data = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        raise LoadError(f"YAMLの解析に失敗しました: {source}", source) from exc

    if not isinstance(data, list):
        raise LoadError(f"トップレベルはコンボのリストである必要があります: {source}", source)

    combos: list[Combo] = []
    for combo_index, raw_combo in enumerate(data):
        if not isinstance(raw_combo, list):
            raise LoadError(
                f"コンボ#{combo_index}は技のリストである必要があります: {source}", source
            )
        combo: Combo = []
        for waza_index, record in enumerate(raw_combo):
            if not isinstance(record, dict):
                raise LoadError(
                    f"コンボ#{combo_index}の技#{waza_index}はマッピングである必要があります: {source}",
                    source,
                )
            try:
                combo.append(Waza.from_dict(record))
            except (KeyError, TypeError, ValueError) as exc:
                raise LoadError(
                    f"コンボ#{combo_index}の技#{waza_index}が不正です: {exc} ({source})",
                    source,
                ) from exc
        combos.append(combo)

    return combos
