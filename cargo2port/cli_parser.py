"""
CLI argument parsing for cargo2port.

This module provides the main argument parsing entry point,
using the argument builders from the cli package.
"""

import argparse
import logging
import sys

import yaml

from cargo2port import VERSION
from cargo2port.c2p_logging import custom_levels
from cargo2port.cli import PROGRAM_DESCRIPTION, add_crates_arguments
from cargo2port.config import CONFIG_FILE_KEYS, DEFAULT_ALIGNMENT, EXIT_CODE
from cargo2port.error_messages import format_error
from cargo2port.errors import ConfigurationError, ErrorCode
from cargo2port.formatter import AlignmentMode


def build_parser():
    parser = argparse.ArgumentParser(prog="cargo2port", description=PROGRAM_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    add_crates_arguments(parser)
    return parser


def parse_arguments(argv=None, logger=None):
    """Parse command-line arguments for cargo2port.

    Args:
        argv: Argument list, defaults to sys.argv[1:].
        logger: Optional logger for config file warnings.

    Returns:
        argparse.Namespace: Parsed and validated arguments.

    Raises:
        ConfigurationError: If the config file or argument values are invalid.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    if not argv:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_CODE.INVALID_ARGUMENTS)

    parsed_args = parser.parse_args(argv)

    # Apply YAML config file overrides if specified
    if parsed_args.config_file:
        parsed_args = apply_yaml_config_overrides(parsed_args, logger=logger)

    validate_args(parsed_args)
    return parsed_args


def apply_yaml_config_overrides(args, logger=None):
    """
    Apply overrides from a YAML config file to the parsed arguments.

    Only keys in CONFIG_FILE_KEYS are honoured; None values are skipped so
    they never clear a command line value.

    Args:
        args (argparse.Namespace): The parsed command-line arguments
        logger: Optional logger for warnings about skipped keys

    Returns:
        argparse.Namespace: The updated arguments with YAML overrides applied

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping.
    """
    try:
        with open(args.config_file, 'r') as f:
            yaml_config = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            format_error('CONFIG_FILE_NOT_FOUND', path=args.config_file),
            parameter="config_file",
            actual=args.config_file,
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            format_error('CONFIG_PARSE_ERROR', path=args.config_file, error=e),
            parameter="config_file",
            code=ErrorCode.CONFIG_PARSE_ERROR,
        ) from e

    if not yaml_config:
        if logger is not None:
            logger.warning(f"Config file {args.config_file} is empty, ignoring it")
        return args

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(
            format_error('CONFIG_PARSE_ERROR', path=args.config_file,
                         error="top level must be a mapping"),
            parameter="config_file",
            code=ErrorCode.CONFIG_PARSE_ERROR,
        )

    args_dict = vars(args)

    for key, value in yaml_config.items():
        if key not in CONFIG_FILE_KEYS:
            if logger is not None:
                logger.warning(f"Config file contains unknown parameter '{key}', skipping")
            continue

        if value is None:
            continue

        if key == "lockfiles":
            if isinstance(value, str):
                value = [value]
            # Command line sources come after the config file ones
            args_dict[key] = list(value) + list(args_dict.get(key) or [])
        else:
            args_dict[key] = value

    return argparse.Namespace(**args_dict)


def validate_args(args):
    """Check argument values and resolve ``args.alignment``.

    Raises:
        ConfigurationError: If no lockfile source was given, or the alignment
            mode or stream log level is unknown.
    """
    if not args.lockfiles:
        raise ConfigurationError(
            "No lockfiles given",
            parameter="lockfiles",
            suggestion="Pass at least one Cargo.lock path, '-' or crate:<name>@<version>",
        )

    args.alignment = AlignmentMode.from_string(args.align or DEFAULT_ALIGNMENT)

    level = getattr(args, "stream_log_level", None)
    if level is not None:
        level_names = logging.getLevelNamesMapping()
        if not isinstance(level, str) or level.upper() not in level_names:
            raise ConfigurationError(
                f"Unknown log level: {level}",
                parameter="stream_log_level",
                expected=list(level_names),
                actual=level,
                suggestion=f"Use a standard level such as WARNING, INFO or DEBUG, or one of: {', '.join(custom_levels)}",
            )
    return args
