"""Shared test fixtures for Fitracker tests."""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId


class FakeCursor:
    """
    Stands in for a Motor cursor: find() returns it synchronously, sort()
    applies the requested keys, to_list() is awaited.
    """

    def __init__(self, docs):
        self.docs = list(docs)
        self.sort_keys = None

    def sort(self, keys):
        self.sort_keys = keys
        # Stable sorts applied from the last key to the first
        for key, direction in reversed(keys):
            self.docs.sort(key=lambda doc: doc[key], reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        return list(self.docs)


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. insert_one stays an AsyncMock.
    collection.find = MagicMock(return_value=FakeCursor([]))
    collection.insert_one = AsyncMock(
        side_effect=lambda doc: MagicMock(inserted_id=ObjectId())
    )
    return collection


@pytest.fixture
def mock_mongo(mock_collection):
    mongo = MagicMock()
    mongo.get_collection = AsyncMock(return_value=mock_collection)
    return mongo


@pytest.fixture
def stored_docs():
    """Stored documents in deliberately scrambled order."""
    base = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
    return [
        {"_id": ObjectId(), "date": "2024-03-01", "food": "oats", "exercise": "",
         "wheyGrams": 25, "creatineGrams": 5, "createdAt": base},
        {"_id": ObjectId(), "date": "2024-03-03", "food": "rice", "exercise": "run",
         "wheyGrams": 30, "creatineGrams": 5, "createdAt": base + timedelta(days=2)},
        {"_id": ObjectId(), "date": "2024-03-01", "food": "", "exercise": "push day",
         "wheyGrams": 0, "creatineGrams": 0, "createdAt": base + timedelta(hours=9)},
        {"_id": ObjectId(), "date": "2024-03-02", "food": "eggs", "exercise": "legs",
         "wheyGrams": 20, "creatineGrams": 3, "createdAt": base + timedelta(days=1)},
    ]


@pytest.fixture
def make_entry():
    """Factory for records as the client receives them."""
    def _make(day, food="", exercise="", whey=0, creatine=0, **extra):
        return {
            "_id": str(ObjectId()),
            "date": day,
            "food": food,
            "exercise": exercise,
            "wheyGrams": whey,
            "creatineGrams": creatine,
            "createdAt": "2024-01-01T00:00:00Z",
            **extra,
        }
    return _make
