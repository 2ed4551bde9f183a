# 📄 File: profilehub/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the user web endpoints
# 🧪 Purpose (Technical Summary):
# Exports the v1 users router
# 🔗 Dependencies:
# users.py
# 🔄 Connected Modules / Calls From:
# profilehub.main

from .users import users_router

__all__ = ["users_router"]
