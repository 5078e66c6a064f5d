"""
Message catalogue - error names and user-facing messages per flow.

Kept in one place so the API layer and tests agree on wording.
"""

from typing import NamedTuple


class Message(NamedTuple):
    name: str
    message: str


# Request validation (API boundary)
VALIDATION_NAME = "ValidationError"
FIELD_MESSAGES = {
    "email": "A valid email is required",
    "password": "Password is required",
    "code": "Code must be a 6 digit number",
    "rut": "RUT is required",
    "name": "Name is required",
}
DEFAULT_FIELD_MESSAGE = "Invalid request body"

# Login
INVALID_CREDENTIALS = Message("InvalidCredentials", "Invalid credentials")
USER_BLOCKED = Message("BlockedUser", "User is blocked")

# Register
USER_ALREADY_EXISTS = Message("UserAlreadyExists", "User already exists")
RUT_NOT_ALLOWED = Message("RutNotAllowed", "User is not allowed to register")

# Verify
USER_NOT_FOUND = Message("UserNotFound", "User not found")
ALREADY_VERIFIED = Message("AlreadyVerified", "User is already verified")
CODE_NOT_FOUND = Message("CodeNotFound", "Verification code not found")
INVALID_CODE = Message("InvalidCode", "Invalid verification code")
VERIFY_SUCCESS = "User verified successfully"
