"""推定結果のテキスト・JSON整形"""

import json

from hosei.models import Combo, Waza


def format_result_line(waza_id: str, waza: Waza) -> str:
    """結果マップの1エントリを1行に整形する"""
    base = waza.hs.base if waza.hs is not None else None
    return f"{waza_id} - dm: {waza.dm}, base_hs: {base}"


def format_result_lines(result: dict[str, Waza]) -> list[str]:
    """結果マップを行のリストに整形する（マップの順序を保持）"""
    return [format_result_line(waza_id, waza) for waza_id, waza in result.items()]


def format_inputs(combos: list[Combo]) -> str:
    """読み込んだコンボを表示用に整形する

    Returns:
        "INPUTS:" 見出しに続けてコンボごとに1行
    """
    lines = [f"INPUTS: {len(combos)} combos"]
    for combo_index, combo in enumerate(combos):
        chain = " -> ".join(f"{waza.id}({waza.dm})" for waza in combo)
        lines.append(f"  #{combo_index}: {chain if chain else '(empty)'}")
    return "\n".join(lines)


def format_json(result: dict[str, Waza], factor: int, base_hosei: float) -> str:
    """推定結果をJSON文字列にする"""
    payload = {
        "factor": factor,
        "base_hosei": base_hosei,
        "entries": [waza.to_dict() for waza in result.values()],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)
