# 📄 File: profilehub/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Service-wide web endpoints that are not tied to a feature area
# 🧪 Purpose (Technical Summary):
# Cross-cutting API routers (health)
# 🔗 Dependencies:
# health.py
# 🔄 Connected Modules / Calls From:
# profilehub.main

from .health import health_router

__all__ = ["health_router"]
