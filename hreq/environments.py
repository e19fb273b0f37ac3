from pydantic import BaseModel, ConfigDict

from .schemas import Environment

DEFAULT_PORT = 59447


class Environments(BaseModel):
    """Base URLs for the symbolic environment names"""

    model_config = ConfigDict(frozen=True)

    prod: str = "https://www.prod.com"  # replace with the production URL
    dev: str = "https://www.dev.com"  # replace with the development URL
    local_host: str = "http://localhost"

    def base_url(self, env_or_url: str, port: int = DEFAULT_PORT) -> str:
        if env_or_url == Environment.prod:
            return self.prod

        if env_or_url == Environment.dev:
            return self.dev

        if env_or_url == Environment.local:
            return f"{self.local_host}:{port}"

        return env_or_url


DEFAULT_ENVIRONMENTS = Environments()


def resolve_url(
    env_or_url: str,
    port: int = DEFAULT_PORT,
    path: str = "",
    environments: Environments = DEFAULT_ENVIRONMENTS,
) -> str:
    # path is appended as given, slashes included
    return f"{environments.base_url(env_or_url, port)}{path}"
