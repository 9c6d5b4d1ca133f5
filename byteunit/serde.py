"""pydantic adapter: `Unit` is written as its display string, read with `Unit.parse`."""

from functools import cache
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import core_schema

from byteunit.errors import InvalidFormat
from byteunit.unit import Unit

EXPECTING = 'string with the format: 99TB|GB|MB|B'
PATTERN = (
    r'^\s*[-+]?(\d+([.,]\d+)?|[.,]\d+)([eE][-+]?\d+)?\s*(B|KB|MB|GB|TB)\s*$'
)


def _validate(value: str | float) -> Unit:
    try:
        return Unit(value)
    except InvalidFormat as e:
        msg = f'expected {EXPECTING} ({e})'
        raise ValueError(msg) from e


def unit_schema(cls: type[Unit] = Unit) -> core_schema.CoreSchema:
    from_str = core_schema.chain_schema([
        core_schema.str_schema(),
        core_schema.no_info_plain_validator_function(_validate),
    ])
    from_python = core_schema.chain_schema([
        core_schema.union_schema([
            core_schema.str_schema(),
            core_schema.float_schema(),
        ]),
        core_schema.no_info_plain_validator_function(_validate),
    ])

    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema([
            core_schema.is_instance_schema(cls),
            from_python,
        ]),
        serialization=core_schema.plain_serializer_function_ser_schema(
            cls.to_display_string,
            return_schema=core_schema.str_schema(),
        ),
    )


def unit_json_schema() -> dict[str, Any]:
    return {
        'type': 'string',
        'pattern': PATTERN,
        'description': f'{EXPECTING}, finite values only',
        'examples': ['512B', '1.50KB', '10GB'],
    }


@cache
def _adapter() -> TypeAdapter[Unit]:
    return TypeAdapter(Unit)


def to_json(unit: Unit) -> str:
    """`Unit` as a JSON string value, e.g. ``'"10.00GB"'``."""
    return _adapter().dump_json(unit).decode()


def from_json(text: str | bytes) -> Unit:
    """
    Read a JSON string value written by `to_json`.

    Raises
    ------
    pydantic.ValidationError
        If `text` is not a JSON string or its content cannot be parsed.
    """
    return _adapter().validate_json(text)
