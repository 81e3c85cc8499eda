from typing import Optional


class GatewayError(Exception):
    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GatewayError):
    status_code = 400
    default_message = "Invalid request."


class ConflictError(GatewayError):
    status_code = 400
    default_message = "Device ID is already registered."


class AuthRequiredError(GatewayError):
    status_code = 401
    default_message = "Device ID and token are required."


class AuthInvalidError(GatewayError):
    status_code = 403
    default_message = "Invalid token or unauthorized device."


class DependencyError(GatewayError):
    status_code = 500
    default_message = "Datastore request failed."


class DependencyUnavailableError(DependencyError):
    status_code = 503
    default_message = "Unable to verify device credentials."


class DatastoreError(Exception):
    """Falha em uma chamada ao datastore, com o código de erro do botocore quando disponível."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class ConditionalWriteError(DatastoreError):
    pass
