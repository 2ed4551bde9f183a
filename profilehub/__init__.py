# 📄 File: profilehub/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that the 'profilehub' folder holds our user profile application
# and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the ProfileHub
# user-profile and membership backend.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - profilehub.main (application factory)
# - packaging tools and anything reporting the service version

"""
ProfileHub - User Profile and Membership Backend

Serves user profiles with membership business rules (discounts, feature
gating, premium eligibility) and exposes profile editing and membership
upgrades as application use cases.
"""

__version__ = "1.0.0"
__title__ = "ProfileHub API"
__description__ = "User profile viewer/editor with membership business rules"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
