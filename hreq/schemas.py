from enum import StrEnum


class Environment(StrEnum):
    prod = "prod"
    dev = "dev"
    local = "local"


class BodyMode(StrEnum):
    auto = "auto"
    method = "method"
