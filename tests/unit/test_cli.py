"""
Tests for CLI argument parsing in cargo2port.cli and cargo2port.cli_parser.

Tests cover:
- Lockfile and output arguments
- Alignment flags and their mutual exclusion
- Logging control arguments
- YAML config file overrides
- Argument validation
"""

import argparse

import pytest

from cargo2port.cli_parser import (
    apply_yaml_config_overrides,
    build_parser,
    parse_arguments,
    validate_args,
)
from cargo2port.config import EXIT_CODE
from cargo2port.errors import ConfigurationError, ErrorCode
from cargo2port.formatter import AlignmentMode


@pytest.fixture
def parser():
    return build_parser()


def write_config(tmp_path, text, name="cargo2port.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestCratesArguments:
    """Tests for lockfile, output and alignment arguments."""

    def test_lockfiles_positional(self, parser):
        args = parser.parse_args(["a/Cargo.lock", "-", "crate:ripgrep@14.1.0"])
        assert args.lockfiles == ["a/Cargo.lock", "-", "crate:ripgrep@14.1.0"]

    def test_output_default(self, parser):
        assert parser.parse_args(["Cargo.lock"]).output is None

    def test_output(self, parser):
        args = parser.parse_args(["-o", "crates.txt", "Cargo.lock"])
        assert args.output == "crates.txt"

    def test_align_default_is_none(self, parser):
        assert parser.parse_args(["Cargo.lock"]).align is None

    @pytest.mark.parametrize("flag,expected", [
        ("-m", "maxlen"),
        ("--maxlen", "maxlen"),
        ("-M", "multiline"),
        ("--multiline", "multiline"),
        ("-j", "justify"),
        ("--justify", "justify"),
    ])
    def test_alignment_shortcuts(self, parser, flag, expected):
        assert parser.parse_args([flag, "Cargo.lock"]).align == expected

    def test_align_choice(self, parser):
        assert parser.parse_args(["--align", "justify", "Cargo.lock"]).align == "justify"

    def test_align_rejects_unknown(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["--align", "centered", "Cargo.lock"])

    @pytest.mark.parametrize("flags", [
        ["-m", "-M"],
        ["-m", "-j"],
        ["-M", "-j"],
        ["--align", "normal", "-m"],
    ])
    def test_alignment_flags_are_exclusive(self, parser, flags):
        with pytest.raises(SystemExit):
            parser.parse_args(flags + ["Cargo.lock"])


class TestUniversalArguments:
    """Tests for config file and logging arguments."""

    def test_defaults(self, parser):
        args = parser.parse_args(["Cargo.lock"])
        assert args.config_file is None
        assert args.debug is False
        assert args.verbose is False
        assert args.stream_log_level is None

    def test_logging_flags(self, parser):
        args = parser.parse_args(["--debug", "--verbose", "--stream-log-level", "WARNING", "Cargo.lock"])
        assert args.debug is True
        assert args.verbose is True
        assert args.stream_log_level == "WARNING"

    def test_config_file_short(self, parser):
        assert parser.parse_args(["-c", "c.yaml"]).config_file == "c.yaml"

    def test_version(self, parser, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "cargo2port" in capsys.readouterr().out


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_no_arguments_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments([])
        assert exc_info.value.code == EXIT_CODE.INVALID_ARGUMENTS
        assert "usage: cargo2port" in capsys.readouterr().err

    def test_resolves_alignment(self):
        args = parse_arguments(["-M", "Cargo.lock"])
        assert args.alignment is AlignmentMode.MULTILINE

    def test_default_alignment(self):
        assert parse_arguments(["Cargo.lock"]).alignment is AlignmentMode.NORMAL

    def test_flags_without_lockfiles(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_arguments(["--verbose"])
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE

    def test_lockfiles_from_config_file(self, tmp_path):
        config = write_config(tmp_path, "lockfiles:\n  - one/Cargo.lock\n  - two/Cargo.lock\n")
        args = parse_arguments(["-c", config])
        assert args.lockfiles == ["one/Cargo.lock", "two/Cargo.lock"]


class TestYamlConfigOverrides:
    """Tests for apply_yaml_config_overrides."""

    def make_args(self, config_file, **overrides):
        values = dict(lockfiles=[], output=None, align=None, config_file=config_file,
                      debug=False, verbose=False, stream_log_level=None)
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_overrides_values(self, tmp_path):
        config = write_config(tmp_path, "align: justify\noutput: crates.txt\nverbose: true\n")
        args = apply_yaml_config_overrides(self.make_args(config))
        assert args.align == "justify"
        assert args.output == "crates.txt"
        assert args.verbose is True

    def test_config_lockfiles_come_first(self, tmp_path):
        config = write_config(tmp_path, "lockfiles:\n  - from-config.lock\n")
        args = apply_yaml_config_overrides(self.make_args(config, lockfiles=["from-cli.lock"]))
        assert args.lockfiles == ["from-config.lock", "from-cli.lock"]

    def test_single_lockfile_string(self, tmp_path):
        config = write_config(tmp_path, "lockfiles: crate:bat@0.24.0\n")
        args = apply_yaml_config_overrides(self.make_args(config))
        assert args.lockfiles == ["crate:bat@0.24.0"]

    def test_null_values_are_ignored(self, tmp_path):
        config = write_config(tmp_path, "output: null\n")
        args = apply_yaml_config_overrides(self.make_args(config, output="keep.txt"))
        assert args.output == "keep.txt"

    def test_unknown_keys_warn(self, tmp_path, mock_logger):
        config = write_config(tmp_path, "colour: blue\nalign: maxlen\n")
        args = apply_yaml_config_overrides(self.make_args(config), logger=mock_logger)
        assert args.align == "maxlen"
        assert not hasattr(args, "colour")
        mock_logger.assert_logged('warning', "unknown parameter 'colour'")

    def test_empty_file_warns(self, tmp_path, mock_logger):
        config = write_config(tmp_path, "")
        args = apply_yaml_config_overrides(self.make_args(config, align="maxlen"), logger=mock_logger)
        assert args.align == "maxlen"
        mock_logger.assert_logged('warning', "is empty")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            apply_yaml_config_overrides(self.make_args(str(tmp_path / "absent.yaml")))
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert "absent.yaml" in exc_info.value.message

    def test_invalid_yaml(self, tmp_path):
        config = write_config(tmp_path, "align: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            apply_yaml_config_overrides(self.make_args(config))
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_top_level_must_be_mapping(self, tmp_path):
        config = write_config(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigurationError) as exc_info:
            apply_yaml_config_overrides(self.make_args(config))
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestValidateArgs:
    """Tests for validate_args."""

    def test_requires_lockfiles(self):
        with pytest.raises(ConfigurationError, match="No lockfiles given"):
            validate_args(argparse.Namespace(lockfiles=[], align=None))

    def test_config_alignment_is_validated(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_args(argparse.Namespace(lockfiles=["Cargo.lock"], align="centered"))
        assert exc_info.value.error.context["parameter"] == "align"

    def test_alignment_is_case_insensitive(self):
        args = validate_args(argparse.Namespace(lockfiles=["Cargo.lock"], align="JUSTIFY"))
        assert args.alignment is AlignmentMode.JUSTIFY

    def test_non_string_alignment(self):
        """A YAML ``align: 5`` arrives as an int."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_args(argparse.Namespace(lockfiles=["Cargo.lock"], align=5))
        assert exc_info.value.error.context["parameter"] == "align"

    @pytest.mark.parametrize("level", ["warning", "DEBUG", "verbose", "Ridiculous"])
    def test_known_stream_log_level(self, level):
        args = validate_args(argparse.Namespace(lockfiles=["Cargo.lock"], align=None, stream_log_level=level))
        assert args.stream_log_level == level

    @pytest.mark.parametrize("level", ["loud", "", 10])
    def test_unknown_stream_log_level(self, level):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_args(argparse.Namespace(lockfiles=["Cargo.lock"], align=None, stream_log_level=level))
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.error.context["parameter"] == "stream_log_level"
