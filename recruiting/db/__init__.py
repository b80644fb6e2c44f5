"""
Database module - relational (SQLAlchemy) and MongoDB connections.
"""
from recruiting.db.mysql import get_db_session, check_mysql_connection, init_mysql_schema
from recruiting.db.mongodb import get_mongo_db, check_mongo_connection, init_mongo_indexes

__all__ = [
    "get_db_session",
    "check_mysql_connection",
    "init_mysql_schema",
    "get_mongo_db",
    "check_mongo_connection",
    "init_mongo_indexes",
]
