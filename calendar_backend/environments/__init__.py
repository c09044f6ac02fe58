"""
Environments Module - External Service Integrations

environments/
├── __init__.py           # Module exports
├── base.py               # Abstract base classes and provider errors
└── google/
    ├── auth/             # Userinfo lookup (token -> profile)
    └── calendar/         # Calendar Events API
"""

from calendar_backend.environments.base import (
    EnvironmentProvider,
    EnvironmentError,
    AuthenticationError,
    APIError,
    UserInfo,
)

__all__ = [
    "EnvironmentProvider",
    "EnvironmentError",
    "AuthenticationError",
    "APIError",
    "UserInfo",
]
