"""
Ordered validation chains over a mutable draft record.

A step receives the draft, may normalize or derive fields on it, and returns
a Result (directly or as an awaitable). The first failing step stops the
chain. Rule failures come back as VALIDATION_ERROR so callers can tell them
apart from storage and internal errors, which pass through untouched.
"""

import inspect
from typing import Awaitable, Callable, TypeVar, Union

from accounts.app.errors import ErrorCode
from accounts.libs.result import Error, Result, Return

D = TypeVar("D")

ValidationStep = Callable[[D], Union[Result[None], Awaitable[Result[None]]]]

PASSTHROUGH_CODES = frozenset({ErrorCode.STORAGE_FAILURE, ErrorCode.INTERNAL_ERROR})


def rule_failed(rule: str, message: str) -> Result[None]:
    return Return.err(Error(rule, message))


def as_validation_error(error: Error) -> Error:
    if error.code in PASSTHROUGH_CODES or error.code == ErrorCode.VALIDATION_ERROR:
        return error
    return Error(
        ErrorCode.VALIDATION_ERROR,
        f"Validation Error: {error.message}",
        reason=error.code,
    )


async def run_validators(draft: D, *steps: ValidationStep) -> Result[None]:
    for step in steps:
        outcome = step(draft)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        if outcome.is_err():
            return Return.err(as_validation_error(outcome.error))
    return Return.ok(None)
