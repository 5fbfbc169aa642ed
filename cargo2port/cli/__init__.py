"""
CLI argument builders for cargo2port.

Modules:
    - common_args: Shared help messages and universal arguments
    - crates_args: Lockfile sources, alignment and output arguments
"""

from cargo2port.cli.common_args import (
    HELP_MESSAGES,
    PROGRAM_DESCRIPTION,
    add_universal_arguments,
)
from cargo2port.cli.crates_args import add_crates_arguments

__all__ = [
    'HELP_MESSAGES',
    'PROGRAM_DESCRIPTION',
    'add_universal_arguments',
    'add_crates_arguments',
]
