"""
Progress record storage service.

Handles listing and inserting progress records in MongoDB.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from common.database import MongoDB
from fitracker.schemas.progress import ProgressCreateRequest

logger = logging.getLogger(__name__)

# Newest day first, newest insert first within a day
LIST_SORT = [("date", -1), ("createdAt", -1)]


def serialize_record(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored document with its ObjectId as a string."""
    return {**doc, "_id": str(doc["_id"])}


class ProgressService:
    """
    Handles progress record storage and retrieval.
    Records are append-only: there is no update or delete.
    """

    def __init__(self, mongo: MongoDB, collection_name: str = "progress"):
        """
        Initialize ProgressService.

        Args:
            mongo: Lazily connected MongoDB handle
            collection_name: Name of the progress collection
        """
        self._mongo = mongo
        self._collection_name = collection_name

    async def _collection(self):
        return await self._mongo.get_collection(self._collection_name)

    async def list_records(self) -> List[Dict[str, Any]]:
        """
        Get every progress record.

        Returns:
            List of records sorted by date descending, then createdAt descending
        """
        collection = await self._collection()
        cursor = collection.find({}).sort(LIST_SORT)
        docs = await cursor.to_list(length=None)

        logger.debug(f"Listed {len(docs)} progress records")
        return [serialize_record(doc) for doc in docs]

    async def create_record(self, candidate: ProgressCreateRequest) -> Dict[str, Any]:
        """
        Insert one progress record.

        Args:
            candidate: Parsed request payload with defaults already applied

        Returns:
            The stored record including its new _id and createdAt
        """
        record: Dict[str, Any] = {
            "date": candidate.date,
            "food": candidate.food,
            "exercise": candidate.exercise,
            "wheyGrams": candidate.wheyGrams,
            "creatineGrams": candidate.creatineGrams,
            "createdAt": datetime.now(timezone.utc),
        }
        if candidate.imageData is not None:
            record["imageData"] = candidate.imageData
        if candidate.imageName is not None:
            record["imageName"] = candidate.imageName

        collection = await self._collection()
        result = await collection.insert_one(record)
        record["_id"] = result.inserted_id

        logger.info(f"Progress record {result.inserted_id} created for {candidate.date}")
        return serialize_record(record)
