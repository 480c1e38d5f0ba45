"""素数篩と素因数分解"""

import math

import numpy as np


def sieve_of_eratosthenes(max_number: int) -> list[int]:
    """max_number未満の素数を昇順で返す

    Args:
        max_number: 上限（この値は含まない）

    Returns:
        素数のリスト。max_number <= 2 の場合は空リスト
    """
    if max_number <= 2:
        return []

    is_prime = np.ones(max_number, dtype=bool)
    is_prime[:2] = False

    # √(max_number - 1) まで篩えば、それ以上の合成数もすべて消える
    for i in range(2, math.isqrt(max_number - 1) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = False

    return np.flatnonzero(is_prime).tolist()


def prime_factorization(value: int) -> list[int]:
    """valueを素因数分解する（重複あり、昇順）

    0 と 1 は空リストになる。

    Args:
        value: 分解する非負整数

    Returns:
        積がvalueになる素数のリスト

    Raises:
        ValueError: valueが負の場合
    """
    if value < 0:
        raise ValueError(f"value must be non-negative: {value}")

    elements: list[int] = []
    remainder = value
    if remainder < 2:
        return elements

    for prime in sieve_of_eratosthenes(math.isqrt(value) + 1):
        while remainder % prime == 0:
            elements.append(prime)
            remainder //= prime

    # √value以下で割り切れなかった残りは素数
    if remainder > 1:
        elements.append(remainder)

    return elements
