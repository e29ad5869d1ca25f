"""Errors raised by the scan and create actions.

A missing phone or name is not an error: the field stays an empty string.
"""

from typing import Optional


class ContactScanError(RuntimeError):
    """Base class for failures that stop an action."""


class BodyRetrievalError(ContactScanError):
    """The message body could not be read from the mail item."""


class TokenAcquisitionError(ContactScanError):
    """No access token for the contact API (bad credentials, missing grant, cancelled sign-in)."""


class RemoteCreateError(ContactScanError):
    """The contact API answered with a non-success status or could not be reached."""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(body)
        else:
            super().__init__(f"Graph error {status_code}: {body}")
