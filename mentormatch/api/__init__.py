# mentormatch/api/__init__.py
# This file makes the api directory a Python package.

from . import auth
from . import mentorship
from . import profile
from . import users

__all__ = [
    "auth",
    "mentorship",
    "profile",
    "users",
]
