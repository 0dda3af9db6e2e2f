"""
Test settings.

In-memory SQLite and deterministic identity/billing configuration.
"""

from .base import *  # noqa: F403

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOG_JSON = False
LOG_LEVEL = "WARNING"

STYTCH_PROJECT_ID = "project-test-00000000-0000-0000-0000-000000000000"
STYTCH_SECRET = "secret-test-fake"
SUPER_ADMIN_EMAILS = ["root@fleetcheck.test"]

PAYSTACK_SECRET_KEY = "sk_test_fake"
PAYSTACK_PLAN_CODE = "PLN_test_plan"
