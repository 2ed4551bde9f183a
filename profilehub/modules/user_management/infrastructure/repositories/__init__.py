# 📄 File: profilehub/modules/user_management/infrastructure/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Places where user records are actually stored
# 🧪 Purpose (Technical Summary):
# Concrete UserRepository implementations and demo seed data
# 🔗 Dependencies:
# in_memory_user_repository.py
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, tests

from .in_memory_user_repository import InMemoryUserRepository, build_demo_users

__all__ = ["InMemoryUserRepository", "build_demo_users"]
