"""CLI設定

コンボファイルのパスのデフォルト値を定義する。
"""

# コンボ定義ファイルのデフォルトパス
DEFAULT_COMBO_PATH = "combo.yaml"

# --combo を上書きする環境変数名
COMBO_PATH_ENVVAR = "HOSEI_COMBO"

