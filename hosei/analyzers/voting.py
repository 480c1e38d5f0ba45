"""候補ペアの多数決によるbase補正値の決定"""

from collections import Counter
from collections.abc import Iterable

from hosei.analyzers.candidates import FactorPair
from hosei.constants import BASE_HOSEI_DIVISOR
from hosei.errors import NoInferenceError


def count_votes(pair_lists: Iterable[list[FactorPair]]) -> Counter:
    """全コンボの候補ペアから因数ごとの出現回数を数える

    ペア (a, b) ごとに a と b をそれぞれ1票とする。
    a == b の場合は同じ因数に2票入る。

    Args:
        pair_lists: コンボごとの候補ペアのリスト

    Returns:
        因数 -> 票数 のCounter
    """
    tally = Counter()
    for pairs in pair_lists:
        for a, b in pairs:
            tally[a] += 1
            tally[b] += 1
    return tally


def vote_ranking(votes: Counter, limit: int | None = None) -> list[tuple[int, int]]:
    """票数の多い順（同数は因数の小さい順）に並べる

    Args:
        votes: count_votes()の結果
        limit: 上位何件まで返すか（Noneなら全件）

    Returns:
        (因数, 票数) のリスト
    """
    ranking = sorted(votes.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        return ranking[:limit]
    return ranking


def select_base_factor(votes: Counter) -> int:
    """最多得票の因数を返す

    同数の場合は最も小さい因数を選ぶ。

    Raises:
        NoInferenceError: 票が1つもない場合
    """
    if not votes:
        raise NoInferenceError("補正値の候補がありません（2技以上のコンボが必要です）")
    return vote_ranking(votes, limit=1)[0][0]


def to_base_hosei(factor: int) -> float:
    """選ばれた因数をbase補正値に変換する"""
    return factor / BASE_HOSEI_DIVISOR
