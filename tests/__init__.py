"""Test package. Settings are read at import time, so the test environment is fixed here first."""

import os

os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-for-unit-tests-0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ.pop("JWT_EXPIRE_MINUTES", None)
