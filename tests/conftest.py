import os

# Settings are read when config is first imported; set them before any test module does
os.environ.setdefault("DB_URI", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("DB_AUTO_CREATE", "false")
os.environ.setdefault("ENABLE_LOGGING_MIDDLEWARE", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ADMIN_JWT_SECRET", "test-admin-secret")
os.environ.setdefault("ADMIN_JWT_EXPIRATION_HOURS", "24")
os.environ.setdefault("USER_JWT_SECRET", "test-user-secret")
os.environ.setdefault("USER_JWT_EXPIRATION_HOURS", "24")
