"""Utility functions for CLI commands."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any
import functools
import logging
import warnings

from click.core import ParameterSource
from typing_extensions import override
import click
import platformdirs
import yaml

from opctype.constants import WELL_KNOWN
from opctype.grammar import MAX_LENGTH

if TYPE_CHECKING:  # pragma no cover
    from collections.abc import Callable

__all__ = ('command_with_config_file', 'common_options', 'complete_content_types')

logger = logging.getLogger(__name__)


def common_options(func: Callable[..., None]) -> Callable[..., None]:
    """Shared options, to be used as a decorator with ``click.command()``."""
    @click.option('-d', '--debug', is_flag=True, help='Enable debug level logging')
    @click.option('-C', '--config', help='Configuration file')
    @click.option('--max-length',
                  type=int,
                  default=MAX_LENGTH,
                  help='Longest content type accepted (0 to disable the limit)')
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:  # pragma: no cover
        return func(*args, **kwargs)

    return wrapper


def complete_content_types(_: Any, __: Any, incomplete: str) -> list[str]:
    """Return well-known content types for completion."""
    return sorted(k for k in WELL_KNOWN if k.startswith(incomplete))


def command_with_config_file(config_file_param_name: str = 'config',
                             default_section: str | None = None) -> type[click.Command]:
    """
    Return a command class that can read from a configuration file in place of missing arguments.

    Parameters
    ----------
    config_file_param_name : str
        The name of the parameter given to Click in ``click.option``.

    default_section : str | None
        Default top key of YAML to read from.
    """
    default_config_file_path = f'{platformdirs.user_config_dir()}/opctype.yml'

    class _ConfigFileCommand(click.Command):
        @override
        def invoke(self, ctx: click.Context) -> Any:
            config_file_path: str | Path = (ctx.params.get(
                config_file_param_name, default_config_file_path) or default_config_file_path)
            config_file_path = Path(config_file_path).expanduser()
            config_data: Any = {}
            debug = ctx.params.get('debug', False)
            try:
                with config_file_path.open(encoding='utf-8') as f:
                    config_data = yaml.safe_load(f)
            except FileNotFoundError:  # pragma no cover
                pass
            if isinstance(config_data, dict):
                alt_data = (config_data.get(default_section, {})
                            if default_section is not None else {})
                for param in ctx.params:
                    if ctx.get_parameter_source(param) == ParameterSource.DEFAULT:
                        yaml_param = param.replace('_', '-')
                        if yaml_param in alt_data:
                            ctx.params[param] = alt_data[yaml_param]
                        elif yaml_param in config_data:
                            ctx.params[param] = config_data[yaml_param]
                ctx.params[config_file_param_name] = config_file_path
            else:  # pragma no cover
                warnings.warn(f'Unexpected type in {config_file_path}: {type(config_data)}',
                              stacklevel=1)
            try:
                return super().invoke(ctx)
            except (click.ClickException, click.exceptions.Exit):
                raise
            except Exception as e:
                if debug:  # pragma no cover
                    logger.exception('Error caught.')
                raise click.Abort from e

    return _ConfigFileCommand
