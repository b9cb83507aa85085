# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import pytest
from fastapi.testclient import TestClient

from learning_service.clients.database_client import get_db
from learning_service.main import app
from tests.fixtures import (FakeDatabase, make_quiz, make_resource, make_topic,
                            seed_user)


@pytest.fixture
def db():
    """Пустое хранилище в памяти."""
    return FakeDatabase()


@pytest.fixture
def catalog_db(db):
    """
    Хранилище с каталогом: 2 темы, 3 квиза, 5 ресурсов (10 элементов)
    и пользователь user-1 с нулевым прогрессом.
    """
    db.seed(
        "topics",
        [
            make_topic(
                "T1",
                quizzes=[
                    make_quiz("QZ1", [("Q1", "A"), ("Q2", "B")]),
                    make_quiz("QZ2", [("Q3", "C")]),
                ],
            ),
            make_topic("T2", quizzes=[make_quiz("QZ3", [("Q4", "D")])]),
        ],
    )
    db.seed("resources", [make_resource(f"R{i}") for i in range(1, 6)])
    seed_user(db, "user-1")
    return db


@pytest.fixture
def client(catalog_db):
    """Тестовый клиент API поверх хранилища в памяти (без подключения к MongoDB)."""

    def override_get_db():
        return catalog_db

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
