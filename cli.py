from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Group, Parameter
from loguru import logger
from rich.table import Table

from byteunit import InvalidFormat, Unit, utils
from byteunit.config import Config
from byteunit.disk import size_table

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)

Suffix = Literal['B', 'KB', 'MB', 'GB', 'TB']
Sizes = Annotated[str, Parameter(allow_leading_hyphen=True)]


class State:
    config = Config()


def _parse(text: str) -> Unit:
    try:
        return Unit.parse(text)
    except InvalidFormat as e:
        logger.error(str(e))
        raise SystemExit(1) from e


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
    config: Path | None = None,
):
    utils.set_logger(level=10 if debug else 20)
    State.config = Config.read(config)
    utils.set_logger(
        level=10 if debug else State.config.log_level,
        log_file=State.config.log_file,
    )

    return app(tokens)


@app.command
def parse(*sizes: Sizes):
    """
    문자열을 byte 단위로 변환.

    Parameters
    ----------
    sizes : str
        e.g. `10GB`, `1,5 KB`, `-1TB`.
    """
    failed = False
    for text in sizes:
        try:
            unit = Unit.parse(text)
        except InvalidFormat as e:
            logger.error(str(e))
            failed = True
            continue

        utils.cnsl.print(f'{text} | {unit.as_bytes():.0f} | {unit}')

    if failed:
        raise SystemExit(1)


@app.command(name='format')
def format_(*values: Annotated[float, Parameter(allow_leading_hyphen=True)]):
    """byte 크기를 사람이 읽기 쉬운 형식으로 출력."""
    for value in values:
        utils.cnsl.print(Unit.from_bytes(value).to_display_string())


@app.command
def convert(size: Sizes, *, to: Suffix = 'B'):
    """
    지정한 단위로 크기 변환.

    Parameters
    ----------
    size : str
        변환할 크기.
    to : Suffix, optional
        대상 단위.
    """
    value = _parse(size).as_bytes() / (1 << Unit.SUFFIXES[to])
    utils.cnsl.print(f'{value:.2f}{to}')


@app.command(name='sum')
def sum_(*sizes: Sizes, subtract: bool = False):
    """
    크기 합계. `--subtract` 지정 시 첫 값에서 나머지를 뺌.

    Parameters
    ----------
    sizes : str
        더할 크기 목록.
    subtract : bool, optional
        뺄셈 여부.
    """
    units = [_parse(x) for x in sizes]
    total = units[0] if units else Unit()

    for unit in units[1:]:
        if subtract:
            total -= unit
        else:
            total += unit

    logger.debug('{} sizes | total={}', len(units), total.as_bytes())
    utils.cnsl.print(str(total))


@app.command
def du(path: Path | None = None, *, depth: int | None = None):
    """
    폴더 용량 표시. 설정의 `threshold` 이상인 항목 강조.

    Parameters
    ----------
    path : Path | None, optional
        대상 경로. 미입력 시 현재 경로.
    depth : int | None, optional
        집계 깊이. 미입력 시 설정값.
    """
    root = path or Path()
    threshold = State.config.threshold
    entries = size_table(root, depth=depth or State.config.depth)

    table = Table('Path', 'Files', 'Size')
    total = Unit()
    for entry in entries:
        total += entry.size
        style = 'bold red' if threshold and entry.size >= threshold else None
        table.add_row(
            str(entry.path.relative_to(root)),
            str(entry.files),
            str(entry.size),
            style=style,
        )

    table.add_section()
    table.add_row('Total', str(sum(x.files for x in entries)), str(total))
    utils.cnsl.print(table)


if __name__ == '__main__':
    app.meta()
