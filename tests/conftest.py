"""Global test fixtures."""

import os

import logfire

# Keep every app created during tests away from the real data directory.
# This must happen at module load time, before any module builds a Config.
os.environ.setdefault("BLOGLIST_DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BLOGLIST_USERS__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
