"""Root command."""
from __future__ import annotations

import click

from .check import main as check
from .simple import guess, show

__all__ = ('opctype',)


@click.group(context_settings={'help_option_names': ('-h', '--help')})
def opctype() -> None:
    """Validate and inspect OPC content types."""


opctype.add_command(check, 'check')
opctype.add_command(guess)
opctype.add_command(show)
