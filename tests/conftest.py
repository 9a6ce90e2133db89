"""Test environment: cheap bcrypt, in-memory storage and an in-memory SQLite URL.

Set before any photodesk module is imported, since settings are read once and cached.
"""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production-use-only")
