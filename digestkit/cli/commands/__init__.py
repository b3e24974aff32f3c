"""
Native Click command implementations for the digestkit CLI.
"""

from .algorithms import algorithms
from .hash import hash_cmd
from .parse import parse
from .verify import verify

COMMANDS = [
    algorithms,
    hash_cmd,
    parse,
    verify,
]

__all__ = ["COMMANDS", "algorithms", "hash_cmd", "parse", "verify"]
