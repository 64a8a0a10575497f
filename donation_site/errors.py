"""
Errors raised by the account and donation operations.

Every error carries a stable ``code`` so the API layer can report it
without inspecting messages:

    try:
        ledger.add_donation(identity, donor_name, item)
    except UnauthorizedError as e:
        logger.info(f"Rejected donation: {e}")
        raise
"""
from typing import Any, Dict


class DonationSiteError(Exception):
    """Base exception for all donation site errors"""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class ValidationError(DonationSiteError):
    """Malformed input: bad email, short password, missing donation fields"""

    code = "BAD_USER_INPUT"


class DuplicateEmailError(DonationSiteError):
    """An account with this email already exists"""

    code = "DUPLICATE_EMAIL"

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class InvalidCredentialsError(DonationSiteError):
    """Unknown email or wrong password; deliberately not told apart"""

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UnauthorizedError(DonationSiteError):
    """Caller is anonymous or lacks the required role"""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)
