"""
Database module - Lazily connected async MongoDB handle using Motor.

Usage:
    from common.database import MongoDB, set_main_database, get_main_database

    # Set up singleton
    set_main_database(MongoDB(uri, database_name))

    # Access anywhere
    collection = await get_main_database().get_collection("progress")
"""

from common.database.mongodb import (
    MongoDB,
    mask_uri,
    # Singleton management
    set_main_database,
    get_main_database,
)

__all__ = [
    "MongoDB",
    "mask_uri",
    # Singleton management
    "set_main_database",
    "get_main_database",
]
