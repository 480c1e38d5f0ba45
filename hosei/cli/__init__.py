"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="詳細ログを表示")
def main(verbose: bool):
    """コンボ補正値推定CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from hosei.cli.commands.check import check

main.add_command(check)


__all__ = [
    "main",
]
