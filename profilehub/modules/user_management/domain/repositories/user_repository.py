# 📄 File: profilehub/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to find and save users without saying where they are actually stored
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User entities following Repository pattern
# and dependency inversion principle
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# Use cases, InMemoryUserRepository, application composition

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities (User)
    - All operations are async for non-blocking I/O
    - A caller must be able to read its own writes
    - Failures propagate to the caller unchanged
    """

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """
        Get every stored user.

        Returns:
            List of User entities
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Insert or replace a user, keyed by user.id.

        Args:
            user: User entity to store
        """
        pass
