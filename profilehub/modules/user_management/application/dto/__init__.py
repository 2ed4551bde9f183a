# 📄 File: profilehub/modules/user_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shapes of the data the app hands back to callers
# 🧪 Purpose (Technical Summary):
# Data transfer objects for the user management application layer
# 🔗 Dependencies:
# user_profile_dto.py
# 🔄 Connected Modules / Calls From:
# Use cases, users API router

from .user_profile_dto import UserProfileDTO

__all__ = ["UserProfileDTO"]
