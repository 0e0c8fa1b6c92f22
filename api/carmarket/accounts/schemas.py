"""
Account API schemas (request models).

Fields are optional at the schema level so a missing field produces the
endpoint's own 400 message rather than a generic validation error.
"""

from __future__ import annotations

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    username: str | None = None
    password: str | None = None
