from .client import DispatchError, HttpClient
from .environments import DEFAULT_PORT, Environments, resolve_url
from .forms import Body, flatten, json_to_form, normalize_body
from .requests_factory import RequestDescriptor, RequestFactory
from .schemas import BodyMode, Environment

__all__ = [
    "DEFAULT_PORT",
    "Body",
    "BodyMode",
    "DispatchError",
    "Environment",
    "Environments",
    "HttpClient",
    "RequestDescriptor",
    "RequestFactory",
    "flatten",
    "json_to_form",
    "normalize_body",
    "resolve_url",
]
