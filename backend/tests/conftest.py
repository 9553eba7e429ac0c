"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a developer database or real telephony credentials
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("TWILIO_AUTH_TOKEN", "test-fake-token")
os.environ.setdefault("LOG_FORMAT", "text")
