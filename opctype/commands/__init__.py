"""Command exports."""
from .check import main as check
from .root import opctype
from .simple import guess, show

__all__ = ('check', 'guess', 'opctype', 'show')
