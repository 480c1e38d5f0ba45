"""コンボ定義YAML読み込みのテスト"""

import pytest

from hosei.errors import LoadError
from hosei.loaders import load_combos, parse_combos
from hosei.models import Waza


VALID_YAML = """\
- - {id: A, dm: 100}
  - {id: B, dm: 250}
- - id: B
    dm: 150
  - id: A
    dm: 300
- - {id: C, dm: 10}
"""


class TestParseCombos:
    """parse_combos のテスト"""

    def test_parses_nested_sequences(self):
        """コンボのリストとして読み込む"""
        combos = parse_combos(VALID_YAML)
        assert combos == [
            [Waza("A", 100), Waza("B", 250)],
            [Waza("B", 150), Waza("A", 300)],
            [Waza("C", 10)],
        ]

    def test_hosei_is_absent_on_load(self):
        """読み込み時のhsは常にNone"""
        combos = parse_combos("- - {id: A, dm: 100, hs: {base: 2.0}}\n")
        assert combos[0][0].hs is None

    def test_numeric_id_becomes_string(self):
        """数値のIDは文字列にする"""
        combos = parse_combos("- - {id: 5, dm: 100}\n")
        assert combos[0][0].id == "5"

    def test_empty_combo_is_kept(self):
        """空のコンボもそのまま保持する"""
        assert parse_combos("- []\n") == [[]]

    @pytest.mark.parametrize(
        "payload",
        [
            "",
            "A: 1\n",
            "- {id: A, dm: 100}\n",
            "- - not-a-mapping\n",
            "- - {id: A}\n",
            "- - {dm: 100}\n",
            "- - {id: A, dm: -1}\n",
            "- - {id: A, dm: '100'}\n",
            "- - {id: A, dm: 1.5}\n",
            "- - {id: A, dm: true}\n",
            "- - [unclosed\n",
        ],
    )
    def test_malformed_payload_raises(self, payload):
        """形式が不正ならLoadError"""
        with pytest.raises(LoadError):
            parse_combos(payload)

    def test_error_message_contains_source(self):
        """エラーメッセージに読み込み元を含む"""
        with pytest.raises(LoadError) as exc_info:
            parse_combos("A: 1\n", source="broken.yaml")
        assert "broken.yaml" in str(exc_info.value)
        assert exc_info.value.path == "broken.yaml"


class TestLoadCombos:
    """load_combos のテスト"""

    def test_loads_file(self, tmp_path):
        """ファイルから読み込む"""
        path = tmp_path / "combo.yaml"
        path.write_text(VALID_YAML, encoding="utf-8")

        combos = load_combos(path)

        assert len(combos) == 3
        assert combos[1][1] == Waza("A", 300)

    def test_accepts_str_path(self, tmp_path):
        """文字列のパスも受け付ける"""
        path = tmp_path / "combo.yaml"
        path.write_text(VALID_YAML, encoding="utf-8")
        assert len(load_combos(str(path))) == 3

    def test_missing_file_raises(self, tmp_path):
        """ファイルがなければLoadError"""
        with pytest.raises(LoadError):
            load_combos(tmp_path / "missing.yaml")

    def test_directory_raises(self, tmp_path):
        """ディレクトリを指定するとLoadError"""
        with pytest.raises(LoadError):
            load_combos(tmp_path)

    def test_non_utf8_file_raises(self, tmp_path):
        """UTF-8でないファイルはLoadError"""
        path = tmp_path / "combo.yaml"
        path.write_bytes(b"- - {id: \xff\xfe, dm: 100}\n")

        with pytest.raises(LoadError) as exc_info:
            load_combos(path)
        assert exc_info.value.path == str(path)
