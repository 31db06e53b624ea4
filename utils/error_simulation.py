"""
Random API error injection.

Lets frontend developers see how the UI behaves when the backend fails,
without breaking anything for real. Controlled by
ERROR_SIMULATION_PROBABILITY (0.0 disables it, 0.25 fails a quarter of
calls). Simulated failures carry isTestError=true so clients and e2e tests
can tell them apart from real errors.
"""

import logging
import random
from typing import Any

import config
from exceptions.simulation import SimulatedApiErrorException

logger = logging.getLogger(__name__)


def simulate_random_error(probability: float | None = None) -> None:
    error_probability = config.ERROR_SIMULATION_PROBABILITY if probability is None else probability
    if random.random() < error_probability:
        logger.info(f"[ErrorSimulation] Injecting simulated API error (p={error_probability})")
        raise SimulatedApiErrorException()


def is_test_error(error_response: Any) -> bool:
    return isinstance(error_response, dict) and error_response.get("isTestError") is True
