"""Root conftest — shared test configuration."""

import os

# Keep test runs independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("API_PREFIX", "/api/v1")
