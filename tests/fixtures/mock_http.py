"""
Mock HTTP responses for testing crate downloads.

Stands in for the streamed ``requests.Response`` objects returned by
``Session.get(..., stream=True)``.
"""

from unittest.mock import MagicMock

import requests


def make_response(content: bytes = b"", status_code: int = 200, headers=None):
    """
    Build a mock streamed response.

    Args:
        content: Body bytes, yielded in 1 KiB chunks by iter_content().
        status_code: HTTP status. Anything >= 400 makes raise_for_status()
            raise requests.HTTPError.
        headers: Response headers, defaults to a matching Content-Length.
    """
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers if headers is not None else {"Content-Length": str(len(content))}
    response.iter_content.return_value = [content[i:i + 1024] for i in range(0, len(content), 1024)]
    response.__enter__.return_value = response
    response.__exit__.return_value = False

    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Client Error for url", response=response)
        response.raise_for_status.side_effect = error
    return response
