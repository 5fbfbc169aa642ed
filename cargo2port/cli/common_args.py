"""
Common CLI arguments and help messages.

This module contains:
- Help message definitions
- Universal argument functions (config file, logging controls)
"""

from cargo2port.config import CRATE_SOURCE_PREFIX, STDIN_SOURCE


HELP_MESSAGES = {
    'lockfiles': (
        "Cargo.lock files to read. Use '{stdin}' to read from standard input, or "
        "'{crate}<name>@<version>' to fetch the Cargo.lock bundled in a crate published "
        "on crates.io. Packages from all lockfiles are merged and de-duplicated."
    ).format(stdin=STDIN_SOURCE, crate=CRATE_SOURCE_PREFIX),
    'output': "Write the cargo.crates block to this file instead of standard output.",
    'align': "Column alignment of the cargo.crates block.",
    'maxlen': "Pad names and versions to the longest name and version.",
    'multiline': "Put the name, version and checksum of each crate on separate lines.",
    'justify': "Size the gap before each version so that every checksum lines up.",
    'config_file': "Path to YAML file with argument overrides.",
    'stream_log_level': "Log level for messages written to standard error (e.g. WARNING, DEBUG).",
}

PROGRAM_DESCRIPTION = (
    "Generate the cargo.crates block of a MacPorts Portfile from one or more Cargo.lock files."
)


def add_universal_arguments(parser):
    """Add the config file and output control arguments.

    Args:
        parser: Argparse parser to add arguments to.
    """
    standard_args = parser.add_argument_group("Standard Arguments")
    standard_args.add_argument(
        '--config-file', '-c',
        type=str,
        help=HELP_MESSAGES['config_file']
    )

    output_control = parser.add_argument_group("Output Control")
    output_control.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )
    output_control.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose mode"
    )
    output_control.add_argument(
        "--stream-log-level",
        type=str,
        default=None,
        help=HELP_MESSAGES['stream_log_level']
    )
