"""
Domain errors for the Namma City seller platform

Every store operation either succeeds or raises exactly one of these,
leaving the stores unmodified. The HTTP layer maps them to status codes
through the handlers registered in main.py.

Author: Namma City
Date: 2025-10-17
"""


class NammaCityError(Exception):
    """Base class for all recoverable platform errors"""

    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ValidationError(NammaCityError):
    """Missing or malformed required input"""

    status_code = 400
    default_message = "Invalid request"


class AuthError(NammaCityError):
    """Credential mismatch or missing/invalid token (never says which)"""

    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(NammaCityError):
    """
    Entity absent or not owned by the caller.

    The two cases are deliberately reported the same way so a seller
    cannot probe for products belonging to another tenant.
    """

    status_code = 404
    default_message = "Not Found"


class ConflictError(NammaCityError):
    """Duplicate unique key (seller email) on registration"""

    status_code = 409
    default_message = "Resource already exists"
