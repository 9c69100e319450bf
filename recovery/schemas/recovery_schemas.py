"""Recovery endpoint request schemas.

Both endpoints answer 204 No Content on success, so there are no response
bodies. Password length is NOT validated here: the domain policy owns it
and reports it as a field error.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RecoverTokenRequest(BaseModel):
    """POST /auth/recover-token"""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr = Field(
        ...,
        description="E-mail address of the account to recover",
        examples=["user@example.com"],
    )


class NewPasswordRequest(BaseModel):
    """PUT /auth/new-password"""

    token: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Recovery token from the e-mail",
    )
    password: str = Field(
        ...,
        description="New password (at least 8 characters)",
        examples=["correct horse battery"],
    )
