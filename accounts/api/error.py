from typing import Dict

from fastapi import status
from accounts.libs.result import Error


class ClientError(Exception):
    """Raised by routes for errors the caller can fix; the message is shown as is."""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, str]:
        body = {"code": self.base_error.code, "message": self.base_error.message}
        if self.base_error.reason:
            body["reason"] = self.base_error.reason
        return body


class ServerError(Exception):
    """Raised by routes for storage and internal failures; details stay in the log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.base_error.code, "message": "Internal server error"}
