"""Simple commands."""
from __future__ import annotations

import json

from bascom import setup_logging
from opctype.content_type import ContentType
from opctype.grammar import MAX_LENGTH, InvalidContentType
from opctype.utils import content_type_for_extension, is_well_known
from tabulate import tabulate, tabulate_formats
import click

from .utils import command_with_config_file, common_options, complete_content_types

__all__ = ('guess', 'show')


@click.command(cls=command_with_config_file('config', 'show'))
@common_options
@click.option('-I', '--no-headers', is_flag=True)
@click.option('-F',
              '--table-format',
              type=click.Choice([*tabulate_formats, 'json']),
              default='plain')
@click.argument('value', shell_complete=complete_content_types)
def show(
        value: str,
        max_length: int = MAX_LENGTH,
        config: str | None = None,  # noqa: ARG001
        table_format: str = 'plain',
        *,
        debug: bool = False,
        no_headers: bool = False) -> None:
    """Show the parts of a content type."""
    setup_logging(debug=debug, loggers={'opctype': {}})
    try:
        content_type = ContentType(value, max_length)
    except InvalidContentType as e:
        click.echo(str(e), err=True)
        raise click.Abort from e
    if table_format == 'json':
        click.echo(
            json.dumps({
                'type': content_type.main_type,
                'subtype': content_type.sub_type,
                'canonical': str(content_type),
                'well_known': is_well_known(content_type),
                'parameters': dict(content_type.parameters)
            }))
        return
    click.echo(
        tabulate((('Type', content_type.main_type), ('Subtype', content_type.sub_type),
                  ('Canonical', str(content_type)),
                  ('Well-known', is_well_known(content_type)),
                  *((f'Parameter {k}', v) for k, v in content_type.parameters.items())),
                 headers=() if no_headers else ('Field', 'Value'),
                 tablefmt=table_format))


@click.command(cls=command_with_config_file('config', 'guess'))
@click.option('-d', '--debug', is_flag=True)
@click.option('-C', '--config', help='Configuration file')
@click.argument('filenames', nargs=-1, required=True)
def guess(
        filenames: tuple[str, ...],
        config: str | None = None,  # noqa: ARG001
        *,
        debug: bool = False) -> None:
    """Print the well-known content type for each file name's extension."""
    setup_logging(debug=debug, loggers={'opctype': {}})
    for filename in filenames:
        click.echo(f'{filename}: {content_type_for_extension(filename) or "unknown"}')
