"""Test configuration and fixtures."""

import os

# Must be set before Settings() is first constructed
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

import logfire  # noqa: E402

# Console output off; the FastAPI app is instrumented on import
logfire.configure(send_to_logfire=False, console=False)