"""
Account business logic: credential check and account creation.
"""

from __future__ import annotations

import logging

from fastapi import status

from carmarket.core.db import DatabaseError, UniqueViolation
from carmarket.core.errors import http_error
from carmarket.storage.base import MarketStore

from . import schemas, security

logger = logging.getLogger(__name__)

DEFAULT_REVIEW_LEVEL = 0


def _require_credentials(payload: schemas.CredentialsRequest) -> tuple[str, str]:
    if not payload.username or not payload.password:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Missing username or password")
    return payload.username, payload.password


async def login(store: MarketStore, payload: schemas.CredentialsRequest) -> dict[str, str]:
    username, password = _require_credentials(payload)

    try:
        user_row = await store.get_user(username)
    except DatabaseError as exc:
        logger.exception("login_failed username=%s", username)
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error") from exc

    # Same response for unknown user and wrong password.
    if user_row is None or not security.verify_password(password, str(user_row.get("password") or "")):
        raise http_error(status.HTTP_401_UNAUTHORIZED, "Invalid username or password")

    return {"message": "Login successful"}


async def create_account(store: MarketStore, payload: schemas.CredentialsRequest) -> dict[str, str]:
    username, password = _require_credentials(payload)
    try:
        password_hash = security.hash_password(password)
    except ValueError as exc:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Invalid password") from exc

    try:
        await store.create_user(
            username=username,
            password=password_hash,
            display_name=username,
            review_level=DEFAULT_REVIEW_LEVEL,
        )
    except UniqueViolation as exc:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Username already exists") from exc
    except DatabaseError as exc:
        logger.exception("create_account_failed username=%s", username)
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error") from exc

    logger.info("account_created username=%s", username)
    return {"message": "Account created successfully"}
