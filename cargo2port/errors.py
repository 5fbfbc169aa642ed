"""
Custom exceptions for cargo2port.

Every failure the tool can hit comes from one of its collaborators: the
lockfile parser, local and archive I/O, the crates.io download, or the
command line. Each kind has its own exception class carrying:
- A machine-readable error code
- A clear error description
- Technical details for debugging
- An actionable suggestion

The resolver and formatter never raise; errors raised while loading
lockfiles propagate unchanged to the caller.
"""

import errno
import tarfile
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Machine-readable error codes for cargo2port errors."""
    # Lockfile errors (1xx)
    LOCKFILE_PARSE = "E101"

    # I/O errors (2xx)
    LOCKFILE_IO = "E201"

    # crates.io errors (3xx)
    DOWNLOAD_FAILED = "E301"
    MISSING_LOCKFILE = "E302"

    # Source specifier errors (4xx)
    INVALID_CRATE_SPEC = "E401"

    # Configuration errors (5xx)
    CONFIG_INVALID_VALUE = "E501"
    CONFIG_FILE_NOT_FOUND = "E502"
    CONFIG_PARSE_ERROR = "E503"

    # Reserved for anything not classified above
    INTERNAL_ERROR = "E901"


@dataclass
class C2PError:
    """
    Structured error information for cargo2port.

    Attributes:
        code: Machine-readable error code.
        message: User-facing error message.
        details: Technical details for debugging.
        suggestion: How to fix the issue.
        context: Additional context information.
    """
    code: ErrorCode
    message: str
    details: str = ""
    suggestion: str = ""
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"[{self.code.value}] {self.message}"]
        if self.details:
            lines.append(f"  Details: {self.details}")
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)


class Cargo2PortException(Exception):
    """
    Base exception class for cargo2port.

    All custom exceptions inherit from this class and provide
    structured error information.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR,
                 details: str = "", suggestion: str = "", **context):
        self.error = C2PError(
            code=code,
            message=message,
            details=details,
            suggestion=suggestion,
            context=context
        )
        super().__init__(str(self.error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def suggestion(self) -> str:
        return self.error.suggestion


class LockfileParseError(Cargo2PortException):
    """
    Raised when a Cargo.lock document cannot be parsed.

    The underlying parser message is kept verbatim as the error message.
    """

    def __init__(self, message: str, source: str = None, suggestion: str = None):
        super().__init__(
            message=message,
            code=ErrorCode.LOCKFILE_PARSE,
            details=f"Source: {source}" if source else "",
            suggestion=suggestion or "Check that the input is a Cargo.lock file generated by cargo",
            source=source
        )


class LockfileIOError(Cargo2PortException):
    """
    Raised when reading a lockfile or a crate archive fails.

    Only the coarse kind of the failure is kept (e.g. ``NotFound``).
    """

    def __init__(self, kind: str, path: str = None, suggestion: str = None):
        super().__init__(
            message=kind,
            code=ErrorCode.LOCKFILE_IO,
            details=f"Path: {path}" if path else "",
            suggestion=suggestion or self._default_suggestion(kind),
            kind=kind,
            path=path
        )

    @property
    def kind(self) -> str:
        return self.error.context["kind"]

    @staticmethod
    def _default_suggestion(kind: str) -> str:
        suggestions = {
            "NotFound": "Verify the lockfile path exists",
            "PermissionDenied": "Check file permissions on the lockfile",
            "IsADirectory": "Pass the path of a Cargo.lock file, not its directory",
            "InvalidData": "The input is corrupt or not UTF-8 encoded",
        }
        return suggestions.get(kind, "Check the input and try again")


class DownloadError(Cargo2PortException):
    """Raised when a crate archive cannot be downloaded from crates.io."""

    def __init__(self, message: str, url: str = None, status_code: int = None,
                 suggestion: str = None):
        details_parts = []
        if url:
            details_parts.append(f"URL: {url}")
        if status_code is not None:
            details_parts.append(f"HTTP status: {status_code}")

        if suggestion is None:
            if status_code == 404:
                suggestion = "Check the crate name and version exist on crates.io"
            else:
                suggestion = "Check network connectivity and try again"

        super().__init__(
            message=message,
            code=ErrorCode.DOWNLOAD_FAILED,
            details="; ".join(details_parts),
            suggestion=suggestion,
            url=url,
            status_code=status_code
        )


class MissingLockfileError(Cargo2PortException):
    """Raised when a downloaded crate archive has no Cargo.lock entry."""

    def __init__(self, crate: str = None):
        super().__init__(
            message="crate missing Cargo.lock file",
            code=ErrorCode.MISSING_LOCKFILE,
            details=f"Crate: {crate}" if crate else "",
            suggestion="Only crates that publish a Cargo.lock (usually binaries) can be used",
            crate=crate
        )


class CrateSpecError(Cargo2PortException):
    """Raised when a ``crate:`` source is not of the form ``name@version``."""

    def __init__(self, spec: str):
        super().__init__(
            message=f"invalid crate specifier: {spec}",
            code=ErrorCode.INVALID_CRATE_SPEC,
            suggestion="Use the form crate:<name>@<version>, e.g. crate:ripgrep@14.1.0",
            spec=spec
        )


class ConfigurationError(Cargo2PortException):
    """
    Raised when command line or config file values are invalid.

    Examples:
        - Unknown alignment mode
        - Config file not found
        - Config file is not valid YAML
    """

    def __init__(self, message: str, parameter: str = None,
                 expected=None, actual=None, suggestion: str = None,
                 code: ErrorCode = ErrorCode.CONFIG_INVALID_VALUE):
        details_parts = []
        if parameter:
            details_parts.append(f"Parameter: {parameter}")
        if expected is not None:
            details_parts.append(f"Expected: {expected}")
        if actual is not None:
            details_parts.append(f"Actual: {actual}")

        super().__init__(
            message=message,
            code=code,
            details="; ".join(details_parts),
            suggestion=suggestion or self._default_suggestion(code),
            parameter=parameter,
            expected=expected,
            actual=actual
        )

    @staticmethod
    def _default_suggestion(code: ErrorCode) -> str:
        suggestions = {
            ErrorCode.CONFIG_INVALID_VALUE: "Check the parameter value and correct it",
            ErrorCode.CONFIG_FILE_NOT_FOUND: "Verify the config file path exists",
            ErrorCode.CONFIG_PARSE_ERROR: "Check config file syntax (YAML format)",
        }
        return suggestions.get(code, "Check the configuration and try again")


_ERRNO_KINDS = {
    errno.ENOENT: "NotFound",
    errno.EACCES: "PermissionDenied",
    errno.EPERM: "PermissionDenied",
    errno.EISDIR: "IsADirectory",
    errno.ENOTDIR: "NotADirectory",
}


def io_error_kind(exc: BaseException) -> str:
    """Reduce an I/O related exception to its coarse kind name."""
    if isinstance(exc, UnicodeDecodeError):
        return "InvalidData"
    if isinstance(exc, EOFError):
        return "UnexpectedEof"
    if isinstance(exc, tarfile.TarError):
        return "InvalidData"
    if isinstance(exc, OSError) and exc.errno in _ERRNO_KINDS:
        return _ERRNO_KINDS[exc.errno]
    return "Other"
