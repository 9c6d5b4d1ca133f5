import dataclasses as dc
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from byteunit.unit import Unit
from byteunit.utils import Progress


@dc.dataclass
class Entry:
    path: Path
    size: Unit = dc.field(default_factory=Unit)
    files: int = 0


def _files(path: Path) -> Iterable[Path]:
    if path.is_file():
        yield path
        return

    yield from (x for x in path.rglob('*') if x.is_file())


def _file_size(path: Path) -> int | None:
    try:
        return path.stat().st_size
    except OSError as e:
        logger.warning('Cannot read size of "{}": {}', path, e)
        return None


def scan(path: str | Path) -> Entry:
    """Total size and number of files of `path` (a file or a directory)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    entry = Entry(path=path)
    for file in _files(path):
        if (size := _file_size(file)) is None:
            continue

        entry.size += size
        entry.files += 1

    logger.debug('{} | files={} | "{}"', entry.size, entry.files, path)
    return entry


def dir_size(path: str | Path) -> Unit:
    return scan(path).size


def size_table(root: str | Path, depth: int = 1) -> list[Entry]:
    """
    Sizes of the entries `depth` levels below `root`, largest first.

    Parameters
    ----------
    root : str | Path
        Directory to inspect.
    depth : int, optional
        ``1`` lists the direct children of `root`.

    Returns
    -------
    list[Entry]
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(root)
    if not root.is_dir():
        raise NotADirectoryError(root)
    if depth < 1:
        msg = f'depth must be at least 1, got {depth}'
        raise ValueError(msg)

    targets = []
    for target in sorted(root.glob('/'.join('*' * depth))):
        if target.exists():
            targets.append(target)
        else:
            logger.warning('Skipping broken link "{}"', target)

    if not targets:
        logger.warning('No entries in "{}"', root)
        return []

    with Progress(transient=True) as p:
        entries = [scan(x) for x in p.track(targets, description='Scanning...')]

    entries.sort(key=lambda x: x.size, reverse=True)
    return entries
