# 📄 File: profilehub/modules/user_management/infrastructure/repositories/in_memory_user_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps users in memory while the app runs, with a ready-made set of demo users
# so the profile screens have something to show right away
#
# 🧪 Purpose (Technical Summary):
# Dict-backed implementation of the UserRepository interface with case-insensitive
# email lookup, an optional artificial latency hook and deterministic demo seeding
#
# 🔗 Dependencies:
# - profilehub.modules.user_management.domain.repositories.user_repository (interface)
# - profilehub.modules.user_management.domain.models.user (domain model)
# - asyncio, random (seeded, reproducible demo data)
#
# 🔄 Connected Modules / Calls From:
# - profilehub.bootstrap (default repository)
# - Use case and API tests

"""
In-Memory User Repository

Storage is a plain dict keyed by user id, so insertion order is the
listing order and save() replaces an existing entry in place.
"""

import asyncio
import logging
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from profilehub.modules.user_management.domain.models.user import MembershipType, User
from profilehub.modules.user_management.domain.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)

DEMO_SEED = 20240601

_FIRST_NAMES = (
    "Ana", "Bruno", "Camila", "Diego", "Elena", "Felipe", "Gabriela", "Hugo",
    "Inés", "Joaquín", "Karen", "Lucas", "María", "Nicolás", "Olivia", "Pablo",
)
_LAST_NAMES = (
    "Souza", "Martínez", "García", "Silva", "López", "Fernández", "Costa",
    "Ramírez", "Oliveira", "Torres", "Moreno", "Pereira",
)


def build_demo_users(count: int = 10, seed: int = DEMO_SEED) -> List[User]:
    """
    Generate reproducible demo users with ids "1".."count".

    Membership, purchases (0-100), spend (0-5000, two decimals) and a
    creation date within the last two years are drawn from a seeded
    generator, so the same seed always yields the same users.

    Args:
        count: Number of users to build
        seed: Random seed

    Returns:
        List of User entities
    """
    rng = random.Random(seed)
    now = datetime.now(timezone.utc)
    users = []

    for i in range(1, count + 1):
        first = rng.choice(_FIRST_NAMES)
        last = rng.choice(_LAST_NAMES)
        cents = rng.randint(0, 500000)

        users.append(User(
            id=str(i),
            name=f"{first} {last}",
            email=f"{_ascii(first)}.{_ascii(last)}{i}@example.com",
            membership_type=rng.choice([MembershipType.FREE, MembershipType.PREMIUM]),
            purchase_count=rng.randint(0, 100),
            total_spent=float(Decimal(cents) / 100),
            created_at=now - timedelta(days=rng.randint(1, 730)),
        ))

    return users


def _ascii(value: str) -> str:
    replacements = str.maketrans("áéíóúñÁÉÍÓÚÑ", "aeiounAEIOUN")
    return value.translate(replacements).lower()


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed implementation of the UserRepository interface.

    Suitable for demos and tests. latency_seconds delays every
    operation to mimic a remote store.
    """

    def __init__(self, users: Optional[Iterable[User]] = None, latency_seconds: float = 0.0):
        """
        Initialize the repository.

        Args:
            users: Initial users to store
            latency_seconds: Delay applied before each operation
        """
        self._users: Dict[str, User] = {}
        self._latency_seconds = latency_seconds

        for user in users or ():
            self._users[user.id] = user

        logger.debug(f"In-memory user repository initialized with {len(self._users)} users")

    @classmethod
    def with_demo_data(cls, count: int = 10, latency_seconds: float = 0.0) -> "InMemoryUserRepository":
        """Create a repository seeded with build_demo_users(count)."""
        return cls(users=build_demo_users(count), latency_seconds=latency_seconds)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        await self._delay()
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        await self._delay()
        normalized = email.strip().lower()
        for user in self._users.values():
            if user.email == normalized:
                return user
        return None

    async def find_all(self) -> List[User]:
        await self._delay()
        return list(self._users.values())

    async def save(self, user: User) -> None:
        await self._delay()
        is_new = user.id not in self._users
        self._users[user.id] = user
        logger.debug(f"{'Inserted' if is_new else 'Replaced'} user {user.id}")

    def __len__(self) -> int:
        return len(self._users)

    async def _delay(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)
