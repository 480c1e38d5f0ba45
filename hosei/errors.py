"""補正値推定で発生するエラー

いずれも回復不能で、検出時点で処理全体を中断する。
呼び出し側（テスト・CLI）が種類ごとに判別できるよう型を分けている。
"""


class HoseiError(Exception):
    """補正値推定エラーの基底クラス"""


class LoadError(HoseiError):
    """コンボファイルの読み込み・解析に失敗した"""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ClosureViolationError(HoseiError):
    """2番目以降の技が、どのコンボの始動技にもなっていない

    Attributes:
        missing_ids: 始動技として存在しない技IDのリスト（ソート済み）
    """

    def __init__(self, missing_ids: list[str]):
        self.missing_ids = sorted(missing_ids)
        super().__init__(
            "始動技として登録されていない技があります: "
            + ", ".join(self.missing_ids)
        )


class DegenerateComboError(HoseiError):
    """比率を計算できないコンボ（始動技ダメージ0、ダメージ減少など）"""

    def __init__(self, message: str, combo_index: int | None = None):
        super().__init__(message)
        self.combo_index = combo_index


class NoInferenceError(HoseiError):
    """補正値の候補が1つも得られなかった"""
