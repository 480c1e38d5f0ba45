"""補正値推定コマンド"""

import click

from hosei.analyzers.voting import vote_ranking
from hosei.cli.formatters.report import format_inputs, format_json, format_result_lines
from hosei.cli.utils.table_printer import print_vote_table
from hosei.config.settings import COMBO_PATH_ENVVAR, DEFAULT_COMBO_PATH
from hosei.errors import HoseiError
from hosei.services import HoseiChecker


@click.command()
@click.option(
    "--combo",
    "combo_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_COMBO_PATH,
    show_default=True,
    envvar=COMBO_PATH_ENVVAR,
    help="コンボ定義YAMLファイルのパス",
)
@click.option("--show-inputs", is_flag=True, default=False, help="読み込んだコンボを表示")
@click.option("--json", "as_json", is_flag=True, default=False, help="結果をJSONで出力")
@click.option(
    "--top",
    type=click.IntRange(min=1),
    default=None,
    help="得票数の上位N件を表示",
)
def check(combo_path: str, show_inputs: bool, as_json: bool, top: int | None):
    """コンボデータからbase補正値を推定して表示"""
    try:
        checker = HoseiChecker.from_path(combo_path)
        if show_inputs and not as_json:
            click.echo(format_inputs(checker.target))
        result = checker.calculate()
    except HoseiError as e:
        click.echo(f"エラー: {e}", err=True)
        raise SystemExit(1)

    if as_json:
        click.echo(format_json(result.entries, result.factor, result.base_hosei))
        return

    for line in format_result_lines(result.entries):
        click.echo(line)

    if top is not None:
        click.echo("")
        print_vote_table(vote_ranking(result.votes, limit=top))
