# 📄 File: profilehub/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of
# ProfileHub can use, like settings, error types and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, the exception hierarchy,
# structured logging and reusable validators.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities

- Configuration management
- Exception hierarchy
- Structured logging
- Common validators
"""

__all__ = []
