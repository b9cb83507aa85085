# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования: документное хранилище в памяти и фабрики документов.

FakeDatabase повторяет ту часть асинхронного API pymongo, которой пользуется
сервис: find_one / find / count_documents / insert_one / update_one
($set, $inc, $setOnInsert, upsert) и command("ping").
"""

import copy
import itertools
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

_ids = itertools.count(1)


def _values_at(node: Any, parts: List[str]) -> List[Any]:
    """Значения по точечному пути; списки раскрываются как в MongoDB."""
    if not parts:
        return [node]
    if isinstance(node, list):
        return [value for item in node for value in _values_at(item, parts)]
    if isinstance(node, dict) and parts[0] in node:
        return _values_at(node[parts[0]], parts[1:])
    return []


def _matches(document: Dict[str, Any], filters: Optional[Dict[str, Any]]) -> bool:
    for key, expected in (filters or {}).items():
        values = _values_at(document, key.split("."))
        if not any(
            value == expected or (isinstance(value, list) and expected in value)
            for value in values
        ):
            return False
    return True


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int
    upserted_id: Any = None


@dataclass
class InsertOneResult:
    inserted_id: Any


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.update_calls: List[Tuple[Dict[str, Any], Dict[str, Any]]] = []

    async def find_one(self, filters: Optional[Dict[str, Any]] = None):
        for document in self.documents:
            if _matches(document, filters):
                return copy.deepcopy(document)
        return None

    def find(self, filters: Optional[Dict[str, Any]] = None) -> FakeCursor:
        return FakeCursor(
            [copy.deepcopy(d) for d in self.documents if _matches(d, filters)]
        )

    async def count_documents(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return sum(1 for d in self.documents if _matches(d, filters))

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        document.setdefault("_id", next(_ids))
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(inserted_id=document["_id"])

    async def update_one(
        self, filters: Dict[str, Any], update: Dict[str, Any], upsert: bool = False
    ) -> UpdateResult:
        self.update_calls.append((filters, update))
        for document in self.documents:
            if _matches(document, filters):
                self._apply(document, update, inserting=False)
                return UpdateResult(matched_count=1, modified_count=1)

        if not upsert:
            return UpdateResult(matched_count=0, modified_count=0)

        document = {k: v for k, v in filters.items() if "." not in k}
        document["_id"] = next(_ids)
        self._apply(document, update, inserting=True)
        self.documents.append(document)
        return UpdateResult(matched_count=0, modified_count=0, upserted_id=document["_id"])

    async def create_index(self, keys, **kwargs) -> str:
        return "_".join(f"{k}_{d}" for k, d in keys)

    @staticmethod
    def _apply(document: Dict[str, Any], update: Dict[str, Any], inserting: bool) -> None:
        for key, value in update.get("$set", {}).items():
            document[key] = value
        for key, value in update.get("$inc", {}).items():
            document[key] = document.get(key, 0) + value
        if inserting:
            for key, value in update.get("$setOnInsert", {}).items():
                document[key] = value


class FakeDatabase:
    name = "lerning_test"

    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]

    async def command(self, command: str) -> Dict[str, Any]:
        return {"ok": 1.0}

    def seed(self, name: str, documents: Sequence[Dict[str, Any]]) -> None:
        for document in documents:
            self[name].documents.append(
                {"_id": next(_ids), **copy.deepcopy(document)}
            )


# ---------------------------------------------------------------------------
# Фабрики документов
# ---------------------------------------------------------------------------


def make_quiz(quiz_id: str, answer_key: Sequence[Tuple[str, str]]) -> Dict[str, Any]:
    """Квиз из пар (ID вопроса, верный вариант)."""
    return {
        "id": quiz_id,
        "title": f"Quiz {quiz_id}",
        "questions": [
            {
                "id": question_id,
                "text": f"Question {question_id}",
                "options": ["A", "B", "C", "D"],
                "correct_option": correct,
            }
            for question_id, correct in answer_key
        ],
    }


def make_topic(
    topic_id: str, quizzes: Sequence[Dict[str, Any]] = ()
) -> Dict[str, Any]:
    return {
        "id": topic_id,
        "title": f"Topic {topic_id}",
        "description": "Test topic description",
        "quiz": list(quizzes),
        "resources": [],
    }


def make_resource(resource_id: str) -> Dict[str, Any]:
    return {
        "id": resource_id,
        "title": f"Resource {resource_id}",
        "type": "article",
        "url": f"https://example.org/{resource_id}",
    }


def seed_user(
    db: FakeDatabase,
    user_id: str = "user-1",
    user_xp: int = 0,
    required_xp: int = 0,
    topics: int = 0,
    quizzes: int = 0,
    resources: int = 0,
) -> None:
    """Леджер и счётчики пользователя, как после StartGame."""
    db.seed(
        "user_levels",
        [{"user_id": user_id, "user_xp": user_xp, "required_xp": required_xp}],
    )
    db.seed(
        "Complateds",
        [
            {
                "user_id": user_id,
                "topics_completed": topics,
                "quizzes_completed": quizzes,
                "resources_completed": resources,
            }
        ],
    )
