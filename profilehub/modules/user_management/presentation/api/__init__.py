# 📄 File: profilehub/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for users
# 🧪 Purpose (Technical Summary):
# API package for the user management module
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# profilehub.main
