import tomllib
from pathlib import Path
from typing import ClassVar, Self

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from byteunit import utils
from byteunit.unit import Unit


class Config(BaseModel):
    """
    Settings of the `byteunit` command.

    Read from ``byteunit.toml`` or the ``[tool.byteunit]`` table of
    ``pyproject.toml``, e.g.::

        [tool.byteunit]
        log_level = "DEBUG"
        threshold = "1.5GB"
    """

    model_config = ConfigDict(extra='forbid')

    FILE: ClassVar[str] = 'byteunit.toml'
    PYPROJECT: ClassVar[str] = 'pyproject.toml'

    log_level: str = 'INFO'
    log_file: Path | None = None
    threshold: Unit = Field(default_factory=Unit)
    depth: int = Field(default=1, ge=1)

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        try:
            utils.log_level(value)
        except KeyError as e:
            raise ValueError(e.args[0]) from e

        return value.upper()

    @classmethod
    def find(cls, root: Path | None = None) -> Path | None:
        root = root or Path.cwd()

        for name in (cls.FILE, cls.PYPROJECT):
            if (path := root / name).is_file():
                return path

        return None

    @classmethod
    def table(cls, path: Path) -> dict | None:
        config = tomllib.loads(path.read_text(encoding='UTF-8'))

        try:
            return config['tool']['byteunit']  # pyproject.toml
        except KeyError:
            pass

        if path.name == cls.PYPROJECT:
            return None

        return config  # byteunit.toml

    @classmethod
    def read(cls, path: str | Path | None = None) -> Self:
        if path is None:
            path = cls.find()
        elif not (path := Path(path)).is_file():
            raise FileNotFoundError(path)

        if path is None or (table := cls.table(path)) is None:
            logger.debug('No config found, using defaults')
            return cls()

        logger.debug('Config="{}"', path)
        return cls.model_validate(table)
