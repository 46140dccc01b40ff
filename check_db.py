#!/usr/bin/env python3
"""
Database connectivity check.

Connects to MONGO_URI (or the URI given as the first argument), ensures the
user index and pings the server. Exits 0 when MongoDB answers, 1 otherwise.
"""
import sys

from pymongo.errors import PyMongoError

from src.domain.errors import RepositoryError
from src.infrastructure.config import settings
from src.infrastructure.repositories import MongoUserRepository, PING_TIMEOUT_SECONDS
from src.infrastructure.logging_config import logger

CONNECT_TIMEOUT_SECONDS = 10

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    uri = argv[0] if argv else settings.MONGO_URI

    try:
        repo = MongoUserRepository.connect(
            uri, db_name=settings.MONGO_DB_NAME, timeout=CONNECT_TIMEOUT_SECONDS
        )
    except RepositoryError as e:
        logger.error(f"MongoDB connection failed: {e}")
        return 1

    try:
        repo.ping()
    except PyMongoError as e:
        logger.error(f"MongoDB did not answer within {PING_TIMEOUT_SECONDS}s: {e}")
        return 1
    finally:
        repo.close()

    logger.info("MongoDB health check passed")
    return 0

if __name__ == "__main__":
    sys.exit(main())
