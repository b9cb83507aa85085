# -*- coding: utf-8 -*-
"""
learning_service/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for document collections.

This module provides reusable asynchronous helpers over the pymongo async API,
with logging and schema validation of every decoded document. Helpers are
stateless and receive the database explicitly, which keeps them simple to
unit test against an in-memory double.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from pydantic import ValidationError as SchemaError
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from learning_service.config.logger import configure_logger
from learning_service.domain.enums import Collection
from learning_service.domain.models import Document
from learning_service.utils.exceptions import (NotFoundError,
                                               StorageUnavailableError,
                                               ValidationError)

T = TypeVar("T", bound=Document)

logger = configure_logger()

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Логирует ошибку драйвера и пробрасывает её как StorageUnavailableError."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"Failed to {operation}: {e}")
        raise StorageUnavailableError(str(e)) from e


def decode_document(model: Type[T], document: Dict[str, Any]) -> T:
    """Decode a raw document into its schema, rejecting shape mismatches."""
    try:
        return model.model_validate(document)
    except SchemaError as e:
        logger.error(f"Failed to decode {model.__name__}: {e}")
        raise ValidationError(
            f"Документ {model.__name__} не соответствует схеме: {e.error_count()} ошибок"
        ) from e


async def find_document(
    db: AsyncDatabase,
    collection: Collection,
    model: Type[T],
    filters: Dict[str, Any],
    resource_id: Optional[str] = None,
) -> T:
    """Retrieve a single document by exact-match filters."""
    with storage_errors(f"get {model.__name__}"):
        document = await db[collection.value].find_one(filters)
    if document is None:
        logger.warning(f"{model.__name__} not found: {filters}")
        raise NotFoundError(resource_type=model.__name__, resource_id=resource_id)
    return decode_document(model, document)


async def list_documents(
    db: AsyncDatabase,
    collection: Collection,
    model: Type[T],
    filters: Optional[Dict[str, Any]] = None,
) -> List[T]:
    """Retrieve every document of a collection matching the filters."""
    items: List[T] = []
    with storage_errors(f"list {collection.value}"):
        async for document in db[collection.value].find(filters or {}):
            items.append(decode_document(model, document))
    logger.debug(f"Retrieved {len(items)} {model.__name__} items")
    return items


async def count_documents(
    db: AsyncDatabase,
    collection: Collection,
    filters: Optional[Dict[str, Any]] = None,
) -> int:
    with storage_errors(f"count {collection.value}"):
        return await db[collection.value].count_documents(filters or {})


async def insert_document(
    db: AsyncDatabase, collection: Collection, document: Dict[str, Any]
) -> None:
    """Insert a new document into the collection."""
    with storage_errors(f"insert into {collection.value}"):
        await db[collection.value].insert_one(document)


async def update_document(
    db: AsyncDatabase,
    collection: Collection,
    model: Type[Document],
    filters: Dict[str, Any],
    update: Dict[str, Any],
    resource_id: Optional[str] = None,
    upsert: bool = False,
) -> None:
    """Apply an update operator document to a single matching document."""
    with storage_errors(f"update {model.__name__}"):
        result = await db[collection.value].update_one(filters, update, upsert=upsert)
    if not upsert and result.matched_count == 0:
        raise NotFoundError(resource_type=model.__name__, resource_id=resource_id)
