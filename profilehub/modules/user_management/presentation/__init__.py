# 📄 File: profilehub/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of user management
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, request schemas and dependencies
# 🔗 Dependencies:
# api subpackage, dependencies.py
# 🔄 Connected Modules / Calls From:
# profilehub.main
