"""
Configuration Validation Module

Validates critical configuration values at startup to fail-fast
with clear error messages instead of runtime failures.
"""

import sys
from typing import Optional

from enums.runtime_environment import RuntimeEnvironment


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_token_secret(secret: Optional[str], default_secret: str, runtime_environment: RuntimeEnvironment) -> None:
    """
    Validate the access-token signing secret.

    Development and test runs may use the built-in placeholder; production may not.

    Raises:
        ConfigValidationError: If secret is missing, the placeholder, or too weak in production
    """
    if not secret or len(secret.strip()) == 0:
        raise ConfigValidationError(
            "TOKEN_SECRET is required and must not be empty!\n"
            "Generate a secure secret with: openssl rand -hex 32\n"
            "Add to .env: TOKEN_SECRET=<your-generated-secret>"
        )

    if runtime_environment != RuntimeEnvironment.PROD:
        return

    if secret == default_secret:
        raise ConfigValidationError(
            "TOKEN_SECRET still has the development placeholder value!\n"
            "Anyone who knows it can forge access tokens.\n"
            "Generate a secure secret with: openssl rand -hex 32"
        )

    if len(secret) < 32:
        raise ConfigValidationError(
            f"TOKEN_SECRET must be at least 32 characters long in production (currently: {len(secret)})\n"
            "Generate a secure secret with: openssl rand -hex 32"
        )


def validate_token_lifetime(seconds: int) -> None:
    if seconds <= 0:
        raise ConfigValidationError(
            f"TOKEN_EXPIRES_IN_SECONDS must be positive (got: {seconds})\n"
            "Example: TOKEN_EXPIRES_IN_SECONDS=86400 (24 hours)"
        )


def validate_hash_rounds(rounds: int) -> None:
    # bcrypt accepts log2 cost factors 4..31
    if not 4 <= rounds <= 31:
        raise ConfigValidationError(
            f"PASSWORD_HASH_ROUNDS must be between 4 and 31 (got: {rounds})\n"
            "Example: PASSWORD_HASH_ROUNDS=10"
        )


def validate_probability(value: float, name: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigValidationError(
            f"{name} must be between 0 and 1 (got: {value})\n"
            f"Example: {name}=0.25 (fail one request in four), {name}=0 to disable"
        )


def validate_startup_config(config_module) -> None:
    """
    Validate all critical configuration at startup.

    Args:
        config_module: The config module to validate

    Raises:
        ConfigValidationError: If any validation fails
    """
    validate_token_secret(
        getattr(config_module, 'TOKEN_SECRET', None),
        getattr(config_module, 'DEFAULT_TOKEN_SECRET', ''),
        getattr(config_module, 'RUNTIME_ENVIRONMENT', RuntimeEnvironment.DEV),
    )
    validate_token_lifetime(config_module.TOKEN_EXPIRES_IN_SECONDS)
    validate_hash_rounds(config_module.PASSWORD_HASH_ROUNDS)
    validate_probability(config_module.ERROR_SIMULATION_PROBABILITY, 'ERROR_SIMULATION_PROBABILITY')


def validate_or_exit(config_module) -> None:
    """
    Validate configuration and exit with error code 1 if validation fails.

    This is the main entry point for startup validation.
    """
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print(f"\n ERROR: Configuration Validation Failed\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nServer startup aborted. Please fix configuration and try again.\n", file=sys.stderr)
        sys.exit(1)
