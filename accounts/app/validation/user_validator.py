"""
User Record Validator

Normalizes and validates users before they reach the user repository, and
derives the stored hashes from plaintext credentials.
"""

import re

from accounts.app.errors import ErrorCode, ValidationRule
from accounts.app.repositories.user_repository import IUserRepository
from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.password_hasher import PasswordHasher
from accounts.app.security.tokens import generate_token
from accounts.app.validation.chain import (
    ValidationStep,
    as_validation_error,
    rule_failed,
    run_validators,
)
from accounts.domain.entities import User, UserDraft
from accounts.libs.result import Error, Result, Return

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,16}$")
PASSWORD_MIN_LENGTH = 8


# ============================================================================
# Stateless steps
# ============================================================================


def email_normalize(draft: UserDraft) -> Result[None]:
    draft.user.email = (draft.user.email or "").strip().lower()
    return Return.ok(None)


def email_required(draft: UserDraft) -> Result[None]:
    if not draft.user.email:
        return rule_failed(ValidationRule.EMAIL_REQUIRED, "Email address is required")
    return Return.ok(None)


def email_format(draft: UserDraft) -> Result[None]:
    if not EMAIL_PATTERN.match(draft.user.email):
        return rule_failed(ValidationRule.EMAIL_INVALID, "Email is not a valid format")
    return Return.ok(None)


def id_greater_than(n: int) -> ValidationStep:
    def check(draft: UserDraft) -> Result[None]:
        if draft.user.id is None or draft.user.id <= n:
            return rule_failed(ValidationRule.INVALID_ID, "Invalid ID")
        return Return.ok(None)

    return check


def password_required(draft: UserDraft) -> Result[None]:
    if not draft.password:
        return rule_failed(ValidationRule.PASSWORD_REQUIRED, "Password is required")
    return Return.ok(None)


def password_min_length(draft: UserDraft) -> Result[None]:
    # An empty password means "keep the current one" on update
    if draft.password and len(draft.password) < PASSWORD_MIN_LENGTH:
        return rule_failed(
            ValidationRule.PASSWORD_TOO_SHORT,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )
    return Return.ok(None)


def password_hash_required(draft: UserDraft) -> Result[None]:
    if not draft.user.password_hash:
        return rule_failed(ValidationRule.PASSWORD_HASH_REQUIRED, "Password is required")
    return Return.ok(None)


def email_taken_on_conflict(saved: Result[User]) -> Result[User]:
    """A concurrent writer won the race for the address after email_is_available passed."""
    if saved.is_err() and saved.error.code == ErrorCode.CONFLICT and "email" in saved.error.message:
        return Return.err(
            as_validation_error(
                Error(ValidationRule.EMAIL_TAKEN, "That email address is already taken")
            )
        )
    return saved


# ============================================================================
# Validator
# ============================================================================


class UserValidator:
    """
    Validating wrapper around an IUserRepository.

    Every read and write runs a validation chain first and only calls
    through to the repository when the chain passes, so a rejected user
    never causes a write.
    """

    def __init__(
        self,
        repository: IUserRepository,
        hmac_hasher: HMACHasher,
        password_hasher: PasswordHasher,
    ):
        self.repository = repository
        self.hmac_hasher = hmac_hasher
        self.password_hasher = password_hasher

    async def get_by_id(self, user_id: int) -> Result[User]:
        draft = UserDraft(user=User(id=user_id, email=""))
        validation = await run_validators(draft, id_greater_than(0))
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.get_by_id(user_id)

    async def get_by_email(self, email: str) -> Result[User]:
        draft = UserDraft(user=User(email=email))
        validation = await run_validators(
            draft, email_normalize, email_required, email_format
        )
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.get_by_email(draft.user.email)

    async def get_by_remember(self, token: str) -> Result[User]:
        """Look a user up by the hash of a remember token, never by the token itself."""
        draft = UserDraft(user=User(email=""), remember_token=token)
        validation = await run_validators(draft, self.remember_hash_required)
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.get_by_remember_hash(draft.user.remember_hash)

    async def create(self, draft: UserDraft) -> Result[User]:
        """
        Validate and store a new user.

        On success ``draft.remember_token`` holds the plaintext remember
        token (generated when none was supplied) and ``draft.password`` is
        cleared.
        """
        validation = await run_validators(
            draft,
            email_normalize,
            email_required,
            email_format,
            self.email_is_available,
            password_required,
            password_min_length,
            self.password_bcrypt,
            password_hash_required,
            self.set_remember_token,
            self.remember_hash_required,
        )
        if validation.is_err():
            return Return.err(validation.error)
        return email_taken_on_conflict(await self.repository.create(draft.user))

    async def update(self, draft: UserDraft) -> Result[User]:
        """
        Validate and store changes to an existing user.

        A new password is optional: without one the stored hash is kept,
        but a non-empty hash is still required so credentials can't be wiped.
        """
        validation = await run_validators(
            draft,
            email_normalize,
            email_required,
            email_format,
            self.email_is_available,
            password_min_length,
            self.password_bcrypt,
            password_hash_required,
            self.remember_hash_required,
        )
        if validation.is_err():
            return Return.err(validation.error)
        return email_taken_on_conflict(await self.repository.update(draft.user))

    async def change_password(self, draft: UserDraft) -> Result[User]:
        """
        Like update, but a new password is mandatory.

        An empty password is rejected instead of meaning "keep the current hash".
        """
        validation = await run_validators(draft, password_required)
        if validation.is_err():
            return Return.err(validation.error)
        return await self.update(draft)

    # ------------------------------------------------------------------------
    # Steps needing collaborators
    # ------------------------------------------------------------------------

    async def email_is_available(self, draft: UserDraft) -> Result[None]:
        existing = await self.repository.get_by_email(draft.user.email)
        if existing.is_err():
            if existing.error.code == ErrorCode.NOT_FOUND:
                return Return.ok(None)
            return Return.err(existing.error)

        if draft.user.id is not None and existing.value.id == draft.user.id:
            return Return.ok(None)
        return rule_failed(ValidationRule.EMAIL_TAKEN, "That email address is already taken")

    def password_bcrypt(self, draft: UserDraft) -> Result[None]:
        if not draft.password:
            return Return.ok(None)

        hashed = self.password_hasher.hash(draft.password)
        if hashed.is_err():
            return Return.err(Error(ErrorCode.INTERNAL_ERROR, hashed.error.message))

        draft.user.password_hash = hashed.value
        draft.password = ""
        return Return.ok(None)

    def set_remember_token(self, draft: UserDraft) -> Result[None]:
        if draft.remember_token:
            return Return.ok(None)
        try:
            draft.remember_token = generate_token()
        except OSError as exc:
            return Return.err(
                Error(ErrorCode.INTERNAL_ERROR, f"Unable to generate token: {exc}")
            )
        return Return.ok(None)

    def remember_hash_required(self, draft: UserDraft) -> Result[None]:
        if draft.remember_token:
            draft.user.remember_hash = self.hmac_hasher.hash(draft.remember_token)
        if not draft.user.remember_hash:
            return rule_failed(
                ValidationRule.REMEMBER_HASH_REQUIRED, "Remember hash is required"
            )
        return Return.ok(None)
