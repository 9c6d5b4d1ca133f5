from logging import LogRecord
from pathlib import Path
from typing import ClassVar

import rich
from loguru import logger
from rich import progress
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.theme import Theme


class _Highlighter(ReprHighlighter):
    highlights = [  # noqa: RUF012
        *ReprHighlighter.highlights,
        r'(?P<vb>\|)',
        r'(?P<size>-?\d+(\.\d+)?[KMGT]?B)\b',
    ]


class _RichHandler(RichHandler):
    LEVELS: ClassVar[dict[str, int]] = {
        'TRACE': 5,
        'DEBUG': 10,
        'INFO': 20,
        'SUCCESS': 25,
        'WARNING': 30,
        'ERROR': 40,
        'CRITICAL': 50,
    }
    _NEW_LVLS: ClassVar[dict[int, str]] = {5: 'TRACE', 25: 'SUCCESS'}

    def emit(self, record: LogRecord) -> None:
        if name := self._NEW_LVLS.get(record.levelno, None):
            record.levelname = name

        return super().emit(record)


LEVELS = tuple(_RichHandler.LEVELS)

cnsl = rich.get_console()
cnsl.push_theme(
    Theme({
        'logging.level.success': 'blue',
        'repr.vb': 'bold blue',
        'repr.size': 'bold cyan',
    })
)


def log_level(level: int | str) -> int:
    if isinstance(level, int):
        return level

    try:
        return _RichHandler.LEVELS[level.upper()]
    except KeyError as e:
        msg = f'`{level}` not in {list(LEVELS)}'
        raise KeyError(msg) from e


def set_logger(
    level: int | str = 20,
    *,
    log_file: str | Path | None = None,
    rich_tracebacks=False,
    **kwargs,
):
    level = log_level(level)

    logger.remove()

    _handler = _RichHandler(
        console=cnsl,
        highlighter=_Highlighter(),
        markup=True,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )
    logger.add(_handler, level=level, format='{message}', **kwargs)

    if log_file:
        logger.add(
            log_file,
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8',
        )


class Progress(progress.Progress):
    @classmethod
    def get_default_columns(cls) -> tuple[progress.ProgressColumn, ...]:
        return (
            progress.TextColumn('[progress.description]{task.description}'),
            progress.BarColumn(bar_width=40),
            progress.MofNCompleteColumn(),
            progress.TimeElapsedColumn(),
        )
