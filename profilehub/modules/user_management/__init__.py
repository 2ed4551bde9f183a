# 📄 File: profilehub/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about users: viewing profiles, editing them and upgrading to Premium
# 🧪 Purpose (Technical Summary):
# User management bounded context with domain, application, infrastructure and presentation layers
# 🔗 Dependencies:
# Layer subpackages
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, profilehub.main

"""
User Management Module

Layers:
- domain: User entity, membership rules, repository port
- application: use cases, profile DTO, analytics port, form validation
- infrastructure: in-memory repository, analytics sinks
- presentation: FastAPI routes
"""
