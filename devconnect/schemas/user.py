"""User Schemas - registration request and token response.

Invariants:
    - RegistrationRequest only checks JSON types; content rules live in
      core/validate_input.py so every failure reports as a field list
    - Missing fields default to None and fail validation there, not here
"""

from pydantic import BaseModel


class RegistrationRequest(BaseModel):
    """Account creation form."""
    name: str | None = None
    email: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    """Signed session token handed back on registration."""
    token: str
