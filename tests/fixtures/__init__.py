"""
Test fixtures package for cargo2port tests.

This package provides a capturing logger and sample Cargo.lock data
for testing the parser, resolver, formatter and command line.
"""

from tests.fixtures.mock_logger import MockLogger
from tests.fixtures.mock_http import make_response
from tests.fixtures.sample_data import (
    CHECKSUMS,
    SAMPLE_LOCKFILE_V3,
    SAMPLE_LOCKFILE_OTHER,
    SAMPLE_LOCKFILE_V1,
    INVALID_TOML,
    make_package,
    make_lockfile,
    build_crate_tarball,
    create_sample_crate,
    block_lines,
)

__all__ = [
    'MockLogger',
    'make_response',
    'CHECKSUMS',
    'SAMPLE_LOCKFILE_V3',
    'SAMPLE_LOCKFILE_OTHER',
    'SAMPLE_LOCKFILE_V1',
    'INVALID_TOML',
    'make_package',
    'make_lockfile',
    'build_crate_tarball',
    'create_sample_crate',
    'block_lines',
]
