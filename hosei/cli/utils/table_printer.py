"""テーブル表示ユーティリティ"""

import click

from hosei.analyzers.voting import to_base_hosei


def print_vote_table(ranking: list[tuple[int, int]]) -> None:
    """因数の得票テーブルを表示する

    Args:
        ranking: vote_ranking()の結果
    """
    click.echo(f"{'順位':^4} | {'因数':>8} | {'補正値':>8} | {'票数':>6}")
    click.echo("-" * 38)

    for rank, (factor, count) in enumerate(ranking, 1):
        click.echo(
            f"{rank:^4} | {factor:>8} | {to_base_hosei(factor):>8.2f} | {count:>6}"
        )
