"""Tests for show and guess."""
from __future__ import annotations

from typing import TYPE_CHECKING
import json

from opctype.commands.root import opctype
from opctype.commands.utils import complete_content_types
from opctype.constants import CORE_PROPERTIES_PART, IMAGE_PNG, RELATIONSHIPS_PART

if TYPE_CHECKING:
    import pathlib

    from click.testing import CliRunner

RESQML = 'application/x-resqml+xml;version=2.0;type=obj_global1dCrs'


def test_show(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype, ('show', '-C', str(tmp_config), RESQML))
    assert result.exit_code == 0
    assert 'x-resqml+xml' in result.output
    assert 'Parameter version' in result.output
    assert 'obj_global1dCrs' in result.output
    assert 'Field' in result.output


def test_show_no_headers(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype, ('show', '-C', str(tmp_config), '-I', 'text/xml'))
    assert result.exit_code == 0
    assert 'Field' not in result.output


def test_show_json(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype, ('show', '-C', str(tmp_config), '-F', 'json', RESQML))
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        'type': 'application',
        'subtype': 'x-resqml+xml',
        'canonical': 'application/x-resqml+xml',
        'well_known': False,
        'parameters': {
            'version': '2.0',
            'type': 'obj_global1dCrs'
        }
    }


def test_show_well_known(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype,
                           ('show', '-C', str(tmp_config), '-F', 'json', RELATIONSHIPS_PART))
    assert result.exit_code == 0
    assert json.loads(result.stdout)['well_known'] is True


def test_show_invalid(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype, ('show', '-C', str(tmp_config), 'text/\u0080'))
    assert result.exit_code == 1


def test_guess(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    result = runner.invoke(opctype,
                           ('guess', '-C', str(tmp_config), '/word/media/image1.PNG', 'a.docx'))
    assert result.exit_code == 0
    assert f'/word/media/image1.PNG: {IMAGE_PNG}' in result.output
    assert 'a.docx: unknown' in result.output


def test_guess_requires_filename(runner: CliRunner, tmp_config: pathlib.Path) -> None:
    assert runner.invoke(opctype, ('guess', '-C', str(tmp_config))).exit_code == 2


def test_complete_content_types() -> None:
    assert complete_content_types(None, None, 'application/vnd.openxmlformats-package.core') == [
        CORE_PROPERTIES_PART
    ]
    assert 'image/png' in complete_content_types(None, None, 'image/')
