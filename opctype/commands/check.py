"""Check content types against the OPC grammar."""
from __future__ import annotations

from typing import TYPE_CHECKING
import logging

from bascom import setup_logging
from opctype.content_type import ContentType
from opctype.grammar import MAX_LENGTH, InvalidContentType
import click

from .utils import command_with_config_file, common_options

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

__all__ = ('main',)

logger = logging.getLogger(__name__)


def _read_lines(f: TextIO) -> Iterator[str]:
    # Blank lines are separators, not content types
    yield from (line.rstrip('\r\n') for line in f if line.strip())


def _check(values: Iterable[str], max_length: int, *, canonical: bool = False) -> int:
    invalid = 0
    for value in values:
        try:
            content_type = ContentType(value, max_length)
        except InvalidContentType as e:
            invalid += 1
            logger.debug('%s', e)
            click.echo(f'{value}: {e.rule.description}')
            continue
        click.echo(f'{value}: {content_type}' if canonical else f'{value}: ok')
    return invalid


@click.command(cls=command_with_config_file('config', 'check'))
@common_options
@click.option('-f',
              '--input-file',
              type=click.File('r', encoding='utf-8'),
              help='File with one content type per line (- for standard input)')
@click.option('--canonical', is_flag=True, help='Print the canonical form of valid content types')
@click.argument('values', nargs=-1)
def main(
        values: tuple[str, ...],
        input_file: TextIO | None = None,
        max_length: int = MAX_LENGTH,
        config: str | None = None,  # noqa: ARG001
        *,
        debug: bool = False,
        canonical: bool = False,
) -> None:
    """Check content types. Exits with status 1 if any is invalid."""
    setup_logging(debug=debug, loggers={'opctype': {}})
    all_values = [*values, *(_read_lines(input_file) if input_file is not None else ())]
    if not all_values:
        msg = 'No content types given.'
        raise click.UsageError(msg)
    if (invalid := _check(all_values, max_length, canonical=canonical)):
        logger.info('%d of %d content types are invalid.', invalid, len(all_values))
        raise click.exceptions.Exit(1)
