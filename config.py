import os
import sys

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test scripts to set RUNTIME_ENVIRONMENT=test before import
load_dotenv(".env", override=False)

DEFAULT_TOKEN_SECRET = "coffee-house-dev-secret-change-me"


def _exit_with_config_error(name: str, reason: Exception | str, expected: str) -> None:
    print(f"\n ERROR: Invalid {name} configuration\n", file=sys.stderr)
    print(f"Reason: {reason}", file=sys.stderr)
    print(f"Expected: {expected}", file=sys.stderr)
    print(f"Current value: {os.environ.get(name, '(not set)')}\n", file=sys.stderr)
    sys.exit(1)


# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(os.environ.get("RUNTIME_ENVIRONMENT", "dev").lower())
except ValueError as e:
    _exit_with_config_error(
        "RUNTIME_ENVIRONMENT", e, ", ".join(env.value for env in RuntimeEnvironment)
    )

# HTTP server
WEBAPP_HOST = os.environ.get("WEBAPP_HOST", "0.0.0.0")
try:
    WEBAPP_PORT = int(os.environ.get("WEBAPP_PORT", "3000"))
    if not 0 < WEBAPP_PORT < 65536:
        raise ValueError(f"WEBAPP_PORT out of range (got: {WEBAPP_PORT})")
except ValueError as e:
    _exit_with_config_error("WEBAPP_PORT", e, "Integer between 1 and 65535 (e.g., 3000)")

_cors_origins_str = os.environ.get(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:3001,http://127.0.0.1:3000,http://127.0.0.1:3001"
)
CORS_ALLOWED_ORIGINS = [origin.strip() for origin in _cors_origins_str.split(",") if origin.strip()]

# Database
DB_NAME = os.environ.get("DB_NAME", "shop.db")
SQL_ECHO = os.environ.get("SQL_ECHO", "false") == "true"

# Authentication
TOKEN_SECRET = os.environ.get("TOKEN_SECRET", DEFAULT_TOKEN_SECRET)
try:
    TOKEN_EXPIRES_IN_SECONDS = int(os.environ.get("TOKEN_EXPIRES_IN_SECONDS", "86400"))  # 24h
except ValueError as e:
    _exit_with_config_error("TOKEN_EXPIRES_IN_SECONDS", e, "Positive integer (e.g., 86400)")

try:
    PASSWORD_HASH_ROUNDS = int(os.environ.get("PASSWORD_HASH_ROUNDS", "10"))
except ValueError as e:
    _exit_with_config_error("PASSWORD_HASH_ROUNDS", e, "Integer between 4 and 31 (e.g., 10)")

# Seed data
PRODUCTS_FIXTURE_PATH = os.environ.get("PRODUCTS_FIXTURE_PATH", "data/products.json")

# Random error injection for frontend testing (0.0 disables it)
try:
    ERROR_SIMULATION_PROBABILITY = float(os.environ.get("ERROR_SIMULATION_PROBABILITY", "0.0"))
except ValueError as e:
    _exit_with_config_error("ERROR_SIMULATION_PROBABILITY", e, "Number between 0 and 1 (e.g., 0.25)")

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"
try:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
except ValueError as e:
    _exit_with_config_error("LOG_RETENTION_DAYS", e, "Positive integer (e.g., 7)")
