# 📄 File: profilehub/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell ProfileHub how to behave, like log level and
# which analytics sink to use.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and its
# cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - profilehub.main (application startup)
# - profilehub.bootstrap (collaborator wiring)

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
