"""
Fetch the Cargo.lock of a crate published on crates.io.

A published crate is a gzip-compressed tarball whose entries live under
``<name>-<version>/``. Crates that ship a binary usually include their
Cargo.lock, which is what we extract.
"""

import io
import tarfile
from pathlib import PurePosixPath
from typing import Optional, Tuple

import requests

from cargo2port.config import (
    CRATE_SPEC_SEPARATOR,
    CRATES_IO_DOWNLOAD_URL,
    DOWNLOAD_CHUNK_SIZE,
    LOCKFILE_NAME,
    USER_AGENT,
)
from cargo2port.errors import (
    CrateSpecError,
    DownloadError,
    LockfileIOError,
    MissingLockfileError,
    io_error_kind,
)
from cargo2port.progress import progress_context


def parse_crate_spec(crate_spec: str) -> Tuple[str, str]:
    """Split ``name@version`` into its parts.

    Anything after a second ``@`` is ignored.

    Raises:
        CrateSpecError: If the separator is missing or either part is empty.
    """
    parts = crate_spec.split(CRATE_SPEC_SEPARATOR)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise CrateSpecError(crate_spec)
    return parts[0], parts[1]


def crate_download_url(name: str, version: str, url_template: str = CRATES_IO_DOWNLOAD_URL) -> str:
    return url_template.format(name=name, version=version)


def download_crate(name: str, version: str, session: Optional[requests.Session] = None,
                   url_template: str = CRATES_IO_DOWNLOAD_URL, logger=None) -> bytes:
    """Download the ``.crate`` archive for ``name`` at ``version``.

    Args:
        name: Crate name.
        version: Exact crate version.
        session: Optional requests session to reuse.
        url_template: Download URL with ``{name}`` and ``{version}`` placeholders.
        logger: Optional logger for status messages.

    Returns:
        Raw bytes of the gzip-compressed tarball.

    Raises:
        DownloadError: On transport failures and non-2xx responses.
    """
    url = crate_download_url(name, version, url_template)
    http = session or requests.Session()
    if logger is not None:
        logger.verbose(f"Downloading {url}")

    try:
        with http.get(url, headers={"User-Agent": USER_AGENT}, stream=True) as response:
            response.raise_for_status()

            length = response.headers.get("Content-Length")
            total = int(length) if length and length.isdigit() else None

            buffer = io.BytesIO()
            with progress_context(f"Downloading {name}@{version}", total=total, logger=logger) as update:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    buffer.write(chunk)
                    update(advance=len(chunk))
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise DownloadError(str(e), url=url, status_code=status) from e
    except requests.RequestException as e:
        raise DownloadError(str(e), url=url) from e
    finally:
        if session is None:
            http.close()

    if logger is not None:
        logger.debug(f"Downloaded {buffer.tell()} bytes from {url}")
    return buffer.getvalue()


def extract_cargo_lock_from_pkg(pkg: bytes, crate: Optional[str] = None) -> str:
    """Return the text of the first Cargo.lock entry in a crate tarball.

    Args:
        pkg: Gzip-compressed tarball bytes.
        crate: Optional ``name@version`` label used in error messages.

    Raises:
        MissingLockfileError: If no entry's file name is Cargo.lock.
        LockfileIOError: If the archive is corrupt or the entry is not UTF-8.
    """
    try:
        with tarfile.open(fileobj=io.BytesIO(pkg), mode="r:gz") as archive:
            for member in archive:
                if not member.isfile() or PurePosixPath(member.name).name != LOCKFILE_NAME:
                    continue
                contents = archive.extractfile(member).read()
                return contents.decode("utf-8")
    except (tarfile.TarError, OSError, EOFError, UnicodeDecodeError) as e:
        raise LockfileIOError(io_error_kind(e), path=crate) from e

    raise MissingLockfileError(crate)
