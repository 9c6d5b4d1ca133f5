from pathlib import Path

import pytest

from byteunit import Unit
from byteunit.disk import dir_size, scan, size_table


@pytest.fixture
def root(tmp_path: Path):
    (tmp_path / 'a' / 'sub').mkdir(parents=True)
    (tmp_path / 'b').mkdir()

    (tmp_path / 'a' / '1.bin').write_bytes(b'0' * 1024)
    (tmp_path / 'a' / 'sub' / '2.bin').write_bytes(b'0' * 2048)
    (tmp_path / 'b' / '3.bin').write_bytes(b'0' * 10)
    (tmp_path / 'c.txt').write_bytes(b'0' * 5)

    return tmp_path


def test_dir_size(root: Path):
    assert dir_size(root) == Unit(3087)
    assert dir_size(root / 'a') == Unit.from_kilobytes(3)
    assert str(dir_size(root / 'b')) == '10B'


def test_scan_file(root: Path):
    entry = scan(root / 'c.txt')

    assert entry.path == root / 'c.txt'
    assert entry.size == Unit(5)
    assert entry.files == 1


def test_scan_empty(tmp_path: Path):
    entry = scan(tmp_path)

    assert entry.size == Unit()
    assert entry.files == 0


def test_size_table(root: Path):
    entries = size_table(root)

    assert [x.path.name for x in entries] == ['a', 'b', 'c.txt']
    assert [x.files for x in entries] == [2, 1, 1]
    assert [str(x.size) for x in entries] == ['3.00KB', '10B', '5B']


def test_size_table_depth(root: Path):
    entries = size_table(root, depth=2)

    assert [x.path.name for x in entries] == ['sub', '1.bin', '3.bin']
    assert entries[0].size == Unit.from_kilobytes(2)


def test_size_table_empty(tmp_path: Path):
    assert size_table(tmp_path) == []


def test_size_table_invalid(root: Path):
    with pytest.raises(FileNotFoundError):
        size_table(root / 'missing')

    with pytest.raises(NotADirectoryError):
        size_table(root / 'c.txt')

    with pytest.raises(ValueError, match='depth'):
        size_table(root, depth=0)


def test_size_table_broken_link(root: Path):
    (root / 'broken').symlink_to(root / 'missing')

    entries = size_table(root)

    assert [x.path.name for x in entries] == ['a', 'b', 'c.txt']
    assert dir_size(root) == Unit(3087)
