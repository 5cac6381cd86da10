from abc import ABC, abstractmethod

from accounts.libs.result import Result


class IMailService(ABC):
    """Outbound transactional mail - application layer"""

    @abstractmethod
    async def send_password_reset(self, to_email: str, token: str) -> Result[None]:
        """Send the plaintext reset token to the account's email address"""
        pass
