"""
Centralized error message templates for cargo2port.

This module provides:
- Consistent error message templates
- User-friendly formatting
- Actionable suggestions

Usage:
    from cargo2port.error_messages import format_error, ERROR_MESSAGES

    # Format a known error
    msg = format_error('LOCKFILE_NOT_FOUND', path='Cargo.lock')

    # Get raw template
    template = ERROR_MESSAGES['LOCKFILE_NOT_FOUND']
"""

from typing import Dict, Any, Optional

from cargo2port.errors import Cargo2PortException


# Error message templates with placeholders
ERROR_MESSAGES: Dict[str, str] = {
    'LOCKFILE_NOT_FOUND': (
        "Lockfile not found: {path}\n"
        "Pass the path of a Cargo.lock file, '-' to read from stdin,\n"
        "or crate:<name>@<version> to fetch a published crate."
    ),

    'CONFIG_FILE_NOT_FOUND': (
        "Configuration file not found: {path}\n"
        "Please ensure the file exists and the path is correct."
    ),

    'CONFIG_PARSE_ERROR': (
        "Failed to parse configuration file: {path}\n"
        "Error: {error}\n"
        "Please check the file syntax (YAML format expected)."
    ),

    'INTERNAL_ERROR': (
        "An internal error occurred: {error}\n"
        "This is likely a bug in cargo2port.\n"
        "Please report this issue at:\n"
        "  https://github.com/macports/cargo2port/issues\n"
        "Include the full error message and stack trace."
    ),
}


def format_error(error_key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Args:
        error_key: Key for the error message template.
        **kwargs: Parameters to substitute in the template.

    Returns:
        Formatted error message string.
    """
    template = ERROR_MESSAGES.get(error_key)
    if template is None:
        return f"Unknown error: {error_key}\nContext: {kwargs}"

    try:
        return template.format(**kwargs)
    except KeyError as e:
        return f"{template}\n(Missing format parameter: {e})"


def get_error_template(error_key: str) -> Optional[str]:
    """Get the raw error template for a given key, or None."""
    return ERROR_MESSAGES.get(error_key)


class ErrorFormatter:
    """
    Helper class for formatting errors with consistent styling.

    Provides methods for formatting cargo2port exceptions
    with optional color support.
    """

    # ANSI color codes
    COLORS = {
        'reset': '\033[0m',
        'bold': '\033[1m',
        'red': '\033[91m',
        'yellow': '\033[93m',
        'cyan': '\033[96m',
    }

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if enabled."""
        if self.use_colors and color in self.COLORS:
            return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"
        return text

    def format_error_header(self, code: str, title: str) -> str:
        header = f"[{code}] {title}"
        return self._color(header, 'red')

    def format_suggestion(self, suggestion: str) -> str:
        prefix = self._color("Suggestion:", 'cyan')
        return f"{prefix} {suggestion}"

    def format_details(self, details: Dict[str, Any]) -> str:
        lines = []
        for key, value in details.items():
            key_styled = self._color(f"{key}:", 'bold')
            lines.append(f"  {key_styled} {value}")
        return "\n".join(lines)

    def format_full_error(self, code: str, title: str,
                          details: Dict[str, Any] = None,
                          suggestion: str = None) -> str:
        """
        Format a complete error message.

        Args:
            code: Error code.
            title: Error title/message.
            details: Optional dictionary of details.
            suggestion: Optional suggestion text.

        Returns:
            Fully formatted error string.
        """
        parts = [self.format_error_header(code, title)]

        if details:
            parts.append(self.format_details(details))

        if suggestion:
            parts.append("")
            parts.append(self.format_suggestion(suggestion))

        return "\n".join(parts)

    def format_exception(self, exc: Cargo2PortException) -> str:
        """Format a cargo2port exception, showing only context values that are set."""
        details = {k: v for k, v in exc.error.context.items() if v is not None}
        return self.format_full_error(
            exc.code.value,
            exc.message,
            details=details,
            suggestion=exc.suggestion or None,
        )
