"""Analyzer modules"""

from hosei.analyzers.candidates import (
    FactorPair,
    candidate_pairs,
    enumerate_factor_pairs,
    scaled_ratio,
)
from hosei.analyzers.closure import build_result_map
from hosei.analyzers.primes import prime_factorization, sieve_of_eratosthenes
from hosei.analyzers.voting import (
    count_votes,
    select_base_factor,
    to_base_hosei,
    vote_ranking,
)

__all__ = [
    "FactorPair",
    "build_result_map",
    "candidate_pairs",
    "count_votes",
    "enumerate_factor_pairs",
    "prime_factorization",
    "scaled_ratio",
    "select_base_factor",
    "sieve_of_eratosthenes",
    "to_base_hosei",
    "vote_ranking",
]
