"""
MongoDB Connection Utility

MongoDB stores:
- consultants : one document per consultant, with residence/domicile and
                the profile (experiences, educations, languages, skills)
                embedded
- users       : one document per user, role embedded by value
- roles       : role catalogue
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from recruiting.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, tz_aware=False)
    return _client


def get_mongo_db() -> Database:
    """Get the recruiting database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str, db: Database = None) -> Collection:
    """Get a specific collection (see COLLECTIONS)."""
    db = db if db is not None else get_mongo_db()
    return db[name]


def check_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "consultants": "consultants",
    "users": "users",
    "roles": "roles",
}


def init_mongo_indexes(db: Database = None) -> None:
    """
    Create indexes. Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    consultants = db[COLLECTIONS["consultants"]]
    consultants.create_index("consultant_no", unique=True)
    consultants.create_index("fiscal_code", unique=True, sparse=True)
    consultants.create_index([("registration_date", DESCENDING)])

    db[COLLECTIONS["users"]].create_index([("username", ASCENDING)], unique=True)
    db[COLLECTIONS["roles"]].create_index([("name", ASCENDING)], unique=True)

    logger.info("MongoDB indexes created")
