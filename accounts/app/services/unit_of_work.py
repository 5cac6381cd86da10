from abc import ABC, abstractmethod

from accounts.app.validation.password_reset_validator import PasswordResetValidator
from accounts.app.validation.user_validator import UserValidator


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management

    Use cases only ever see validated repositories: every write goes
    through a validation chain before it reaches storage.
    """

    # Validated repositories (initialized in __aenter__)
    users: UserValidator
    password_resets: PasswordResetValidator

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
