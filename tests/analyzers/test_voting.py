"""多数決による補正値決定のテスト"""

from collections import Counter

import pytest

from hosei.analyzers.voting import (
    count_votes,
    select_base_factor,
    to_base_hosei,
    vote_ranking,
)
from hosei.errors import NoInferenceError


class TestCountVotes:
    """count_votes のテスト"""

    def test_each_side_of_pair_gets_one_vote(self):
        """ペアの両側に1票ずつ入る"""
        votes = count_votes([[(3, 2)], [(2, 5)]])
        assert votes == Counter({2: 2, 3: 1, 5: 1})

    def test_square_pair_counts_twice(self):
        """(a, a) は a に2票"""
        votes = count_votes([[(2, 2)]])
        assert votes[2] == 2

    def test_empty_input(self):
        """入力なしなら空"""
        assert count_votes([]) == Counter()
        assert count_votes([[], []]) == Counter()

    def test_accepts_generator(self):
        """ジェネレータでも集計できる"""
        votes = count_votes(pairs for pairs in ([(2, 3)], [(2, 7)]))
        assert votes == Counter({2: 2, 3: 1, 7: 1})


class TestVoteRanking:
    """vote_ranking のテスト"""

    def test_sorted_by_count_then_factor(self):
        """票数降順、同数は因数昇順"""
        votes = Counter({5: 2, 3: 2, 7: 1, 100: 4})
        assert vote_ranking(votes) == [(100, 4), (3, 2), (5, 2), (7, 1)]

    def test_limit(self):
        """上位N件に絞る"""
        votes = Counter({5: 2, 3: 2, 7: 1})
        assert vote_ranking(votes, limit=2) == [(3, 2), (5, 2)]


class TestSelectBaseFactor:
    """select_base_factor のテスト"""

    def test_most_frequent_factor(self):
        """最多得票の因数を選ぶ"""
        assert select_base_factor(Counter({100: 5, 150: 3, 2: 4})) == 100

    def test_tie_breaks_to_smallest_factor(self):
        """同数の場合は最小の因数"""
        assert select_base_factor(Counter({150: 3, 100: 3, 120: 3})) == 100

    def test_is_deterministic_regardless_of_insertion_order(self):
        """挿入順に依存しない"""
        forward = Counter()
        for factor in (5, 3, 9):
            forward[factor] += 1
        backward = Counter()
        for factor in (9, 3, 5):
            backward[factor] += 1
        assert select_base_factor(forward) == select_base_factor(backward) == 3

    def test_no_votes_raises(self):
        """票がなければNoInferenceError"""
        with pytest.raises(NoInferenceError):
            select_base_factor(Counter())


class TestToBaseHosei:
    """to_base_hosei のテスト"""

    @pytest.mark.parametrize(
        "factor, expected", [(100, 1.0), (150, 1.5), (80, 0.8), (2, 0.02)]
    )
    def test_divides_by_100(self, factor, expected):
        """因数を100で割る"""
        assert to_base_hosei(factor) == pytest.approx(expected)
