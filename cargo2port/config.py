import enum
import os

from cargo2port import VERSION


C2P_DEBUG = os.getenv("C2P_DEBUG", "0").lower() in ("1", "true", "yes")


class EXIT_CODE(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGUMENTS = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 4
    DOWNLOAD_ERROR = 5
    INTERRUPTED = 130

    def __str__(self):
        return self.name


DEFAULT_ALIGNMENT = "normal"

# Portfile block layout
CARGO_CRATES_HEADER = "cargo.crates"
LINE_CONTINUATION = " \\\n"
LINE_INDENT = "    "
COLUMN_SEPARATOR = "  "
NORMAL_NAME_WIDTH = 28
NORMAL_VERSION_WIDTH = 8

# Always put between the name and version in justify mode, on top of the computed gap
JUSTIFIED_BASE_WIDTH = 5

# Lockfile source addressing
STDIN_SOURCE = "-"
CRATE_SOURCE_PREFIX = "crate:"
CRATE_SPEC_SEPARATOR = "@"
LOCKFILE_NAME = "Cargo.lock"

# Cargo.lock v1 keeps checksums in [metadata] under "checksum <name> <version> (<source>)"
METADATA_CHECKSUM_PREFIX = "checksum "
METADATA_NO_CHECKSUM = "<none>"

CRATES_IO_DOWNLOAD_URL = os.getenv(
    "C2P_CRATES_IO_URL",
    "https://crates.io/api/v1/crates/{name}/{version}/download",
)
USER_AGENT = f"cargo2port/{VERSION} (+https://github.com/macports/cargo2port)"
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Arguments that may be overridden from a YAML config file
CONFIG_FILE_KEYS = ["lockfiles", "align", "output", "stream_log_level", "verbose", "debug"]
