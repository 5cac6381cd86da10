"""
Error codes carried by accounts.libs.result.Error.
"""


class ErrorCode:
    # Input rejected by a validation chain, before any write
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Persistence
    NOT_FOUND = "NOT_FOUND"
    STORAGE_FAILURE = "STORAGE_FAILURE"
    # Unique constraint hit on write, message names the constraint
    CONFLICT = "CONFLICT"

    # Credentials
    CREDENTIAL_MISMATCH = "CREDENTIAL_MISMATCH"
    HASHING_FAILURE = "HASHING_FAILURE"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Password reset
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Collaborators
    MAIL_DELIVERY_FAILED = "MAIL_DELIVERY_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationRule:
    """Reason codes attached to VALIDATION_ERROR results."""

    INVALID_ID = "INVALID_ID"
    EMAIL_REQUIRED = "EMAIL_REQUIRED"
    EMAIL_INVALID = "EMAIL_INVALID"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    PASSWORD_REQUIRED = "PASSWORD_REQUIRED"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_HASH_REQUIRED = "PASSWORD_HASH_REQUIRED"
    REMEMBER_HASH_REQUIRED = "REMEMBER_HASH_REQUIRED"
    TOKEN_HASH_REQUIRED = "TOKEN_HASH_REQUIRED"
