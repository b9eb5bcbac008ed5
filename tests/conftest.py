import os

# Settings are read once when tidyhq.main is imported, so the test database must be configured first
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_tidyhq.db")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "10")
os.environ["SEED_DEV_DATA"] = "false"
