# 📄 File: profilehub/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the feature areas of ProfileHub, each kept in its own folder
# 🧪 Purpose (Technical Summary):
# Namespace package for bounded contexts (DDD modules)
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, profilehub.main
