"""User collection use cases (list, create, update, delete, search)."""

from __future__ import annotations

from typing import Any
import logging

from users_api.domain.users import (
    find_index,
    is_number,
    is_usable_name,
    name_matches,
    next_user_id,
    parse_user_id,
)
from users_api.repositories.json_storage import JsonUserStorage

logger = logging.getLogger(__name__)

CREATE_INVALID = "Name and age are required. Age must be a number."
UPDATE_INVALID = "Provide at least name or age (number) to update."
ID_INVALID = "Invalid user ID."
QUERY_MISSING = 'Query parameter "name" is required.'


class UserError(Exception):
    """Base exception for user workflow."""


class InvalidInputError(UserError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserError):
    """Raised when the addressed id is not in the collection."""


class UserService:
    """Applies user operations to the collection held by a JsonUserStorage."""

    def __init__(self, storage: JsonUserStorage) -> None:
        self.storage = storage

    def _user_id(self, raw_id: str | None) -> int:
        try:
            return parse_user_id(raw_id)
        except ValueError:
            raise InvalidInputError(ID_INVALID) from None

    def list_users(self) -> list[dict]:
        return self.storage.snapshot()

    def create_user(self, payload: Any) -> dict:
        if not isinstance(payload, dict):
            raise InvalidInputError(CREATE_INVALID)
        name = payload.get("name")
        age = payload.get("age")
        if not is_usable_name(name) or not is_number(age):
            raise InvalidInputError(CREATE_INVALID)

        with self.storage.transaction() as tx:
            user = {"id": next_user_id(tx.users), "name": name, "age": age}
            tx.users.append(user)
            tx.mark_dirty()
        logger.info("created user %s", user["id"])
        return user

    def update_user(self, raw_id: str | None, payload: Any) -> dict:
        user_id = self._user_id(raw_id)
        if not isinstance(payload, dict):
            raise InvalidInputError(UPDATE_INVALID)
        name = payload.get("name")
        age = payload.get("age")
        # Only a present, non-numeric age without a usable name is rejected.
        if not is_usable_name(name) and "age" in payload and not is_number(age):
            raise InvalidInputError(UPDATE_INVALID)

        with self.storage.transaction() as tx:
            index = find_index(tx.users, user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            user = tx.users[index]
            if is_usable_name(name):
                user["name"] = name
            if is_number(age):
                user["age"] = age
            tx.mark_dirty()
        logger.info("updated user %s", user_id)
        return user

    def delete_user(self, raw_id: str | None) -> None:
        user_id = self._user_id(raw_id)
        with self.storage.transaction() as tx:
            index = find_index(tx.users, user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            del tx.users[index]
            tx.mark_dirty()
        logger.info("deleted user %s", user_id)

    def search_users(self, query: str | None) -> list[dict]:
        if not query:
            raise InvalidInputError(QUERY_MISSING)
        return [user for user in self.storage.snapshot() if name_matches(user, query)]
