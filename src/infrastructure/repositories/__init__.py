from datetime import datetime
from typing import Callable, Optional

import pymongo
from pydantic import ValidationError
from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from src.domain.errors import (
    DatabaseConnectionError,
    DuplicateUserError,
    IndexCreationError,
    UserLookupError,
    UserWriteError,
)
from src.domain.models.db_models import User, utc_now
from src.domain.repositories import IUserRepository
from src.infrastructure.logging_config import logger

EMAIL_ADDRESS_FIELD = "email_address"
DB_NAME = "mindful-insights"
USER_COLLECTION = "user"
PING_TIMEOUT_SECONDS = 2

Clock = Callable[[], datetime]


class MongoUserRepository(IUserRepository):
    """MongoDB implementation of the user repository.

    Owns a single ``MongoClient`` for its whole lifetime. The client is
    thread safe, so one repository can be shared by concurrent requests.
    ``clock`` stamps ``created_at`` on insert and can be replaced in tests.
    """

    def __init__(self, client: MongoClient, clock: Optional[Clock] = None, db_name: str = DB_NAME):
        self.client = client
        self.clock = clock or utc_now
        self.db = self.client[db_name]
        self.collection = self.db[USER_COLLECTION]

    @classmethod
    def connect(
        cls,
        uri: str,
        clock: Optional[Clock] = None,
        db_name: str = DB_NAME,
        timeout: Optional[float] = None,
    ) -> "MongoUserRepository":
        """
        Create a client for ``uri`` and make sure the email index exists.

        Stored datetimes are read back timezone aware.

        Raises DatabaseConnectionError if the driver rejects the URI and
        IndexCreationError if the index cannot be created. The client is
        closed before IndexCreationError propagates.
        """
        try:
            client = MongoClient(uri, tz_aware=True)
        except (PyMongoError, ValueError) as exc:
            logger.error(
                "MongoUserRepository.connect.failed",
                extra={"error": str(exc)},
            )
            raise DatabaseConnectionError(f"db_error: {exc}") from exc

        repo = cls(client, clock=clock, db_name=db_name)
        try:
            repo.ensure_indexes(timeout=timeout)
        except IndexCreationError:
            client.close()
            raise

        logger.info("MongoUserRepository.connect.ok", extra={"db_name": db_name})
        return repo

    def ensure_indexes(self, timeout: Optional[float] = None) -> None:
        # Same name and keys every time, so re-running is a no-op on the server.
        try:
            with pymongo.timeout(timeout):
                self.collection.create_index(
                    [(EMAIL_ADDRESS_FIELD, ASCENDING)],
                    name=EMAIL_ADDRESS_FIELD,
                    unique=False,
                )
        except PyMongoError as exc:
            logger.error(
                "MongoUserRepository.ensure_indexes.failed",
                extra={"index": EMAIL_ADDRESS_FIELD, "error": str(exc)},
            )
            raise IndexCreationError(f"failed to create index: {exc}") from exc

    def ping(self) -> None:
        """Ping the server, giving up after PING_TIMEOUT_SECONDS."""
        with pymongo.timeout(PING_TIMEOUT_SECONDS):
            self.client.admin.command("ping")

    def create_user(self, user: User, timeout: Optional[float] = None) -> None:
        doc = user.model_dump(exclude={"created_at"})
        doc["created_at"] = self.clock()

        try:
            with pymongo.timeout(timeout):
                self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            logger.warning(
                "MongoUserRepository.create_user.duplicate",
                extra={EMAIL_ADDRESS_FIELD: user.email_address},
            )
            raise DuplicateUserError(exc) from exc
        except PyMongoError as exc:
            logger.error(
                "MongoUserRepository.create_user.failed",
                extra={EMAIL_ADDRESS_FIELD: user.email_address, "error": str(exc)},
            )
            raise UserWriteError(f"error creating user: {exc}") from exc

        logger.info(
            "MongoUserRepository.create_user.ok",
            extra={EMAIL_ADDRESS_FIELD: user.email_address},
        )

    def get_user(self, email_address: str, timeout: Optional[float] = None) -> User:
        """
        Return the user stored under ``email_address``.

        A missing user is not an error: the empty ``User()`` is returned.
        The password is never handed back to callers.
        """
        try:
            with pymongo.timeout(timeout):
                user_data = self.collection.find_one({EMAIL_ADDRESS_FIELD: email_address})
        except PyMongoError as exc:
            raise UserLookupError(f"error finding user: {exc}") from exc

        if user_data is None:
            logger.debug(
                "MongoUserRepository.get_user.missing",
                extra={EMAIL_ADDRESS_FIELD: email_address},
            )
            return User()

        try:
            user = User.model_validate(user_data)
        except ValidationError as exc:
            raise UserLookupError(f"error finding user: {exc}") from exc

        user.password = ""
        return user

    def close(self) -> None:
        self.client.close()
