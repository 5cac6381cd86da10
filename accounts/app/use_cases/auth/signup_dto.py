"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (business intent)
- SignupResponse: Output from use case (structured result)
"""

from pydantic import BaseModel

from .dtos import UserInfo


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    Created by API layer from the request body. Email normalization and
    format checks happen in the user validation chain, not here.
    """

    name: str = ""
    email: str
    password: str


class SignupResponse(BaseModel):
    """
    Signup response - structured output from use case

    The remember token is returned once, in plaintext; only its hash is stored.
    """

    user: UserInfo
    remember_token: str
