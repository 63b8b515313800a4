"""Small long/short form command-line argument parser."""

from __future__ import annotations

from .config import TokenConfig, load_token_config
from .errors import NoMatchingParameterError, ParserError
from .parameter import ArgumentType, Parameter
from .parser import Parser
from .version import __version__

__all__ = [
    "ArgumentType",
    "NoMatchingParameterError",
    "Parameter",
    "Parser",
    "ParserError",
    "TokenConfig",
    "__version__",
    "load_token_config",
]
