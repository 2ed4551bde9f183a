# 📄 File: profilehub/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The concrete plumbing: where users are kept and where activity reports are sent
# 🧪 Purpose (Technical Summary):
# Infrastructure adapters implementing the UserRepository and AnalyticsService ports
# 🔗 Dependencies:
# repositories, analytics subpackages
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, tests
