"""ContentType tests."""
from __future__ import annotations

import copy
import pickle

from opctype.content_type import ContentType, parse
from opctype.grammar import InvalidContentType
from opctype.typing import Rule
import pytest

RESQML = 'application/x-resqml+xml;version=2.0;type=obj_global1dCrs'


def test_simple() -> None:
    content_type = ContentType('text/xml')
    assert content_type.main_type == 'text'
    assert content_type.sub_type == 'xml'
    assert not content_type.has_parameters()
    assert content_type.parameter_keys() == ()
    assert content_type.get_parameter('charset') is None
    assert str(content_type) == 'text/xml'
    assert content_type.to_string(with_parameters=True) == 'text/xml'


def test_parameters() -> None:
    content_type = parse(RESQML)
    assert content_type.has_parameters()
    assert len(content_type.parameter_keys()) == 2
    assert content_type.parameter_keys() == ('version', 'type')
    assert content_type.get_parameter('version') == '2.0'
    assert content_type.get_parameter('type') == 'obj_global1dCrs'
    assert content_type.get_parameter('Version') is None
    assert str(content_type) == 'application/x-resqml+xml'
    assert content_type.to_string() == 'application/x-resqml+xml'
    assert content_type.to_string(with_parameters=True) == RESQML


def test_parameter_order_is_kept() -> None:
    content_type = parse('text/xml;z=1;a=2;m=3')
    assert content_type.parameter_keys() == ('z', 'a', 'm')
    assert content_type.to_string(with_parameters=True) == 'text/xml;z=1;a=2;m=3'


@pytest.mark.parametrize('value', ['text/xml', RESQML, 'a/b;c=d', 'application/vnd.lotus-1-2-3'])
def test_reparse_is_equal(value: str) -> None:
    content_type = parse(value)
    again = parse(content_type.to_string(with_parameters=True))
    assert again == content_type
    assert again.main_type == content_type.main_type
    assert again.sub_type == content_type.sub_type
    assert dict(again.parameters) == dict(content_type.parameters)
    assert hash(again) == hash(content_type)


def test_equality() -> None:
    assert parse('text/xml') == ContentType('text/xml')
    assert parse('text/xml') != parse('text/xml;a=b')
    assert parse('text/xml;a=b;c=d') != parse('text/xml;c=d;a=b')
    assert parse('text/xml') != parse('TEXT/XML')
    assert parse('text/xml') != 'text/xml'
    assert len({parse('text/xml'), parse('text/xml'), parse('text/html')}) == 2


def test_invalid() -> None:
    with pytest.raises(InvalidContentType) as exc_info:
        ContentType('text/xml/app')
    assert exc_info.value.rule is Rule.EXTRA_SLASH


def test_max_length() -> None:
    with pytest.raises(InvalidContentType) as exc_info:
        parse(RESQML, max_length=10)
    assert exc_info.value.rule is Rule.TOO_LONG


def test_immutable() -> None:
    content_type = parse(RESQML)
    with pytest.raises(AttributeError):
        content_type.main_type = 'image'  # type: ignore[misc]
    with pytest.raises(AttributeError):
        content_type._main_type = 'image'  # type: ignore[misc]  # noqa: SLF001
    with pytest.raises(AttributeError):
        del content_type._sub_type  # noqa: SLF001
    with pytest.raises(AttributeError):
        content_type.other = 1  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        content_type.parameters['version'] = '3.0'  # type: ignore[index]
    assert content_type.get_parameter('version') == '2.0'


def test_repr() -> None:
    assert repr(parse(RESQML)) == f"ContentType('{RESQML}')"


def test_copy() -> None:
    content_type = parse(RESQML)
    duplicate = copy.copy(content_type)
    assert duplicate == content_type
    assert duplicate.parameter_keys() == ('version', 'type')


def test_deepcopy() -> None:
    record = {'part': parse(RESQML)}
    duplicate = copy.deepcopy(record)
    assert duplicate['part'] == record['part']
    assert duplicate['part'].get_parameter('type') == 'obj_global1dCrs'


def test_pickle() -> None:
    content_type = parse(RESQML)
    loaded = pickle.loads(pickle.dumps(content_type))  # noqa: S301
    assert loaded == content_type
    assert loaded.to_string(with_parameters=True) == RESQML


def test_pickle_ignores_length_limit() -> None:
    content_type = parse('text/' + 'x' * 2000, max_length=0)
    loaded = pickle.loads(pickle.dumps(content_type))  # noqa: S301
    assert loaded.sub_type == 'x' * 2000
