"""コンボごとの補正値候補（因数ペア）の列挙

素因数の振り分けは 2^k 通り（k は重複込みの素因数の個数）を全て調べるため、
計算量は k に対して指数的に増える。
"""

from hosei.analyzers.primes import prime_factorization
from hosei.constants import FIXED_POINT_SCALE
from hosei.errors import DegenerateComboError
from hosei.models import Combo

FactorPair = tuple[int, int]


def scaled_ratio(combo: Combo) -> int:
    """始動技と2番目の技のダメージ比率を固定小数点整数にする

    比率 = (dm[1] - dm[0]) / dm[0] を浮動小数で求め、
    FIXED_POINT_SCALE倍して切り捨てる（四捨五入しない）。

    Args:
        combo: 2技以上のコンボ

    Returns:
        スケール済みの比率

    Raises:
        ValueError: コンボが2技未満の場合
        DegenerateComboError: 始動技のダメージが0、またはダメージが減っている場合
    """
    if len(combo) < 2:
        raise ValueError(f"combo must have at least 2 waza: {len(combo)}")

    before_damage = combo[0].dm
    if before_damage == 0:
        raise DegenerateComboError(f"始動技 {combo[0].id} のダメージが0です")

    current_damage = combo[1].dm - before_damage
    if current_damage < 0:
        raise DegenerateComboError(
            f"{combo[1].id} のダメージ({combo[1].dm})が始動技 {combo[0].id} "
            f"({before_damage})より小さいです"
        )

    ratio = current_damage / before_damage
    return int(ratio * FIXED_POINT_SCALE)


def enumerate_factor_pairs(elements: list[int]) -> list[FactorPair]:
    """素因数を2つの積に振り分ける全通りから、自明でないペアを列挙する

    各素因数をaかbのどちらかに掛ける 2^k 通りを調べ、
    a != 1 かつ b != 1 のペアのみを残す。(a, b) と (b, a) は同一とみなす。

    Args:
        elements: 素因数のリスト（重複あり）

    Returns:
        (a, b) のリスト（発見順）
    """
    pairs: list[FactorPair] = []
    seen: set[FactorPair] = set()

    for position in range(2 ** len(elements)):
        a = 1
        b = 1
        for i, element in enumerate(elements):
            if position & (1 << i) == 0:
                a *= element
            else:
                b *= element

        if a == 1 or b == 1 or (a, b) in seen:
            continue
        pairs.append((a, b))
        seen.add((a, b))
        seen.add((b, a))

    return pairs


def candidate_pairs(combo: Combo) -> list[FactorPair]:
    """コンボの比率から補正値候補のペアを求める"""
    return enumerate_factor_pairs(prime_factorization(scaled_ratio(combo)))
