from enum import Enum


class RuntimeEnvironment(str, Enum):
    DEV = "dev"
    PROD = "prod"
    TEST = "test"
