"""Unit tests for ProgressService against a mocked Motor collection."""

import pytest
from datetime import datetime
from bson import ObjectId

from conftest import FakeCursor
from fitracker.schemas.progress import ProgressCreateRequest
from fitracker.services.progress.progress_service import LIST_SORT, ProgressService


# ─────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def service(mock_mongo):
    return ProgressService(mock_mongo, collection_name="progress")


# ─────────────────────────────────────────────────────────────────
# list_records
# ─────────────────────────────────────────────────────────────────


class TestListRecords:

    @pytest.mark.asyncio
    async def test_empty_collection_returns_empty_list(self, service):
        assert await service.list_records() == []

    @pytest.mark.asyncio
    async def test_sorted_by_date_then_created_at_descending(
        self, service, mock_collection, stored_docs
    ):
        cursor = FakeCursor(stored_docs)
        mock_collection.find.return_value = cursor

        records = await service.list_records()

        assert cursor.sort_keys == LIST_SORT == [("date", -1), ("createdAt", -1)]
        assert [(r["date"], r["exercise"]) for r in records] == [
            ("2024-03-03", "run"),
            ("2024-03-02", "legs"),
            ("2024-03-01", "push day"),  # later insert on the same day first
            ("2024-03-01", ""),
        ]

    @pytest.mark.asyncio
    async def test_ids_rendered_as_strings(self, service, mock_collection, stored_docs):
        mock_collection.find.return_value = FakeCursor(stored_docs)

        records = await service.list_records()

        assert all(isinstance(r["_id"], str) for r in records)
        assert {r["_id"] for r in records} == {str(d["_id"]) for d in stored_docs}

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self, service, mock_mongo):
        mock_mongo.get_collection.side_effect = ConnectionError("no route to host")

        with pytest.raises(ConnectionError):
            await service.list_records()

    @pytest.mark.asyncio
    async def test_uses_configured_collection(self, service, mock_mongo):
        await service.list_records()

        mock_mongo.get_collection.assert_awaited_once_with("progress")


# ─────────────────────────────────────────────────────────────────
# create_record
# ─────────────────────────────────────────────────────────────────


class TestCreateRecord:

    @pytest.mark.asyncio
    async def test_inserts_exactly_one_document(self, service, mock_collection):
        candidate = ProgressCreateRequest(date="2024-01-01", food="oats")

        await service.create_record(candidate)

        mock_collection.insert_one.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_returns_new_id_and_created_at(self, service):
        candidate = ProgressCreateRequest(date="2024-01-01", food="oats", wheyGrams=25)

        record = await service.create_record(candidate)

        assert record["_id"]
        assert ObjectId.is_valid(record["_id"])
        assert isinstance(record["createdAt"], datetime)
        assert record["createdAt"].tzinfo is not None
        assert record["food"] == "oats"
        assert record["wheyGrams"] == 25

    @pytest.mark.asyncio
    async def test_ids_unique_across_creates(self, service):
        candidate = ProgressCreateRequest(date="2024-01-01")

        ids = [(await service.create_record(candidate))["_id"] for _ in range(10)]

        assert len(set(ids)) == 10

    @pytest.mark.asyncio
    async def test_defaults_stored(self, service, mock_collection):
        candidate = ProgressCreateRequest.model_validate(
            {"date": "2024-01-01", "wheyGrams": "abc"}
        )

        await service.create_record(candidate)

        stored = mock_collection.insert_one.call_args.args[0]
        assert stored["food"] == ""
        assert stored["exercise"] == ""
        assert stored["wheyGrams"] == 0
        assert stored["creatineGrams"] == 0

    @pytest.mark.asyncio
    async def test_image_fields_only_stored_when_present(self, service, mock_collection):
        await service.create_record(ProgressCreateRequest(date="2024-01-01"))
        without_image = mock_collection.insert_one.call_args.args[0]

        await service.create_record(ProgressCreateRequest(
            date="2024-01-02",
            imageData="data:image/png;base64,iVBORw0KGgo=",
            imageName="front.png",
        ))
        with_image = mock_collection.insert_one.call_args.args[0]

        assert "imageData" not in without_image
        assert with_image["imageData"] == "data:image/png;base64,iVBORw0KGgo="
        assert with_image["imageName"] == "front.png"
