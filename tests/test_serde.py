import re

import pytest
from pydantic import BaseModel, ValidationError

from byteunit import Unit
from byteunit.serde import EXPECTING, PATTERN, from_json, to_json


class Quota(BaseModel):
    limit: Unit
    used: Unit = Unit()


def test_validate_str():
    quota = Quota(limit='10GB', used='1,5 KB')

    assert quota.limit == Unit.from_gigabytes(10)
    assert quota.used == Unit(1536)


def test_validate_python_values():
    unit = Unit(5)

    assert Quota(limit=unit).limit is unit
    assert Quota(limit=2048).limit == Unit(2048)
    assert Quota(limit=-1.5).limit == Unit(-1.5)


def test_validate_invalid():
    with pytest.raises(ValidationError, match=re.escape(EXPECTING)) as e:
        Quota(limit='10XB')

    assert 'invalid format for unit size: 10XB' in str(e.value)

    with pytest.raises(ValidationError):
        Quota(limit=None)  # type: ignore[arg-type]


def test_serialize():
    quota = Quota(limit=Unit.from_terabytes(10), used=Unit.from_gigabytes(-10))

    assert quota.model_dump() == {'limit': '10.00TB', 'used': '-10.00GB'}
    assert quota.model_dump_json() == '{"limit":"10.00TB","used":"-10.00GB"}'


def test_json():
    quota = Quota.model_validate_json('{"limit": "1TB", "used": "512MB"}')

    assert quota.limit == Unit.from_terabytes(1)
    assert Quota.model_validate_json(quota.model_dump_json()) == quota


def test_json_requires_string():
    with pytest.raises(ValidationError):
        Quota.model_validate_json('{"limit": 1024}')

    with pytest.raises(ValidationError, match=re.escape(EXPECTING)):
        Quota.model_validate_json('{"limit": "1 kb"}')


def test_json_schema():
    schema = Quota.model_json_schema()['properties']['limit']

    assert schema['type'] == 'string'
    assert schema['pattern'] == PATTERN
    assert re.match(PATTERN, '1,5 KB')
    assert not re.match(PATTERN, '10XB')


def test_to_json():
    assert to_json(Unit.from_gigabytes(-10)) == '"-10.00GB"'
    assert to_json(Unit(10)) == '"10B"'


def test_from_json():
    assert from_json('"10.00GB"') == Unit.from_gigabytes(10)
    assert from_json(b'"-1TB"') == Unit.from_terabytes(-1)

    with pytest.raises(ValidationError, match=re.escape(EXPECTING)):
        from_json('"abc"')

    with pytest.raises(ValidationError):
        from_json('10')


@pytest.mark.parametrize('text', ['1e3B', '.5KB', ',5 KB', '-1TB', '+2 GB'])
def test_json_schema_pattern_accepts_parsable(text):
    assert re.match(PATTERN, text)
    assert Unit.parse(text)


@pytest.mark.parametrize('text', ['5.KB', '1kb', 'infTB'])
def test_json_schema_pattern_rejects_unparsable(text):
    assert not re.match(PATTERN, text)
