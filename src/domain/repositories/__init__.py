from abc import ABC, abstractmethod
from typing import Optional
from ..models.db_models import User

class IUserRepository(ABC):
    """Interface for a user repository."""
    @abstractmethod
    def ensure_indexes(self, timeout: Optional[float] = None) -> None:
        pass

    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def create_user(self, user: User, timeout: Optional[float] = None) -> None:
        pass

    @abstractmethod
    def get_user(self, email_address: str, timeout: Optional[float] = None) -> User:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
