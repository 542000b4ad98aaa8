from typing import Dict, Optional

from fastapi import status

from fleetadmin.libs.result import Error


class ClientError(Exception):
    """Expected failure the caller can fix; rendered with the error code and details"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)

    def errors(self) -> dict:
        errors = {"code": self.base_error.code}
        if self.base_error.details is not None:
            errors["details"] = self.base_error.details
        return errors


class ServerError(Exception):
    """Failure the caller cannot fix; the message stays in the logs"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def errors(self) -> dict:
        return {"code": self.base_error.code}
