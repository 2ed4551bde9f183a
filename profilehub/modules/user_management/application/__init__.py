# 📄 File: profilehub/modules/user_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The steps the app follows when someone views, edits or upgrades a user
# 🧪 Purpose (Technical Summary):
# Application layer: use cases orchestrating domain rules, repository and analytics ports
# 🔗 Dependencies:
# use_cases, dto, services subpackages
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, presentation layer
