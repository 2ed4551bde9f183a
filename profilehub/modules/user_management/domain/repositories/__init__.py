# 📄 File: profilehub/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access contracts that define how users are looked up and saved
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces following Repository pattern for data access abstraction
# 🔗 Dependencies:
# Repository interface classes
# 🔄 Connected Modules / Calls From:
# Use cases, infrastructure implementations

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
