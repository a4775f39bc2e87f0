"""SQLite-backed settings used for test runs in CI/local development."""

from __future__ import annotations

import os

# Provide defaults so the base settings module can import without environment variables.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALLOWED_HOSTS", "localhost,testserver")

from .settings import *  # noqa: E402,F401,F403

# Use an in-memory SQLite database for tests.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable migrations for the dash app to speed up SQLite test setup.
MIGRATION_MODULES = {"django_dash": None}

TIME_ZONE = "UTC"
DASH_PER_PAGE = 10
DASH_DATA_SOURCES = []
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
