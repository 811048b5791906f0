"""
gitward - local pre-commit guard that blocks secrets from entering git history
"""

__version__ = "0.1.0"
