import json
import logging
import operator
from dataclasses import dataclass
from typing import Final
from urllib.parse import urlencode

import pydantic

from .httptypes import FormParams, JsonDict, JsonValue
from .schemas import BodyMode

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE: Final = "application/json"
FORM_CONTENT_TYPE: Final = "application/x-www-form-urlencoded"

METHODS_WITH_JSON_BODY = frozenset({"POST", "PUT", "DELETE"})

# floats at or above this magnitude keep exponent notation (1e+21)
_EXPONENT_THRESHOLD = 1e21

_json_object_adapter = pydantic.TypeAdapter(dict[str, pydantic.JsonValue])


@dataclass(frozen=True)
class Body:
    content: str
    content_type: str | None


def parse_json_object(data: str) -> JsonDict:
    """Parse ``data`` as a JSON document whose top level is an object.

    Raises ``pydantic.ValidationError`` on malformed JSON and on any
    other top-level value (array, string, number, ...).
    """
    return _json_object_adapter.validate_json(data)


def stringify(value: JsonValue) -> str:
    if isinstance(value, str):
        return value

    # integral floats print without a fraction: 1.0 -> "1", 1e2 -> "100"
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) < _EXPONENT_THRESHOLD
    ):
        return str(int(value))

    return json.dumps(value)


def flatten(obj: JsonDict, parent_key: str = "") -> FormParams:
    """Flatten a JSON object into bracket-notation form parameters.

    ``{"user": {"name": "a", "tags": [1, 2]}}`` becomes
    ``[("user[name]", "a"), ("user[tags][0]", "1"), ("user[tags][1]", "2")]``.
    Empty objects and arrays produce no parameters.
    """
    params: FormParams = []

    for key, value in obj.items():
        current_key = f"{parent_key}[{key}]" if parent_key else key
        params.extend(_flatten_value(current_key, value))

    return params


def _flatten_value(key: str, value: JsonValue) -> FormParams:
    if isinstance(value, dict):
        return flatten(value, key)

    if isinstance(value, list):
        params: FormParams = []

        for index, item in enumerate(value):
            params.extend(_flatten_value(f"{key}[{index}]", item))

        return params

    return [(key, stringify(value))]


def encode_form(params: FormParams) -> str:
    # stable sort: values of a repeated key keep their order
    return urlencode(sorted(params, key=operator.itemgetter(0)))


def json_to_form(obj: JsonDict) -> str:
    return encode_form(flatten(obj))


def normalize_body(
    data: str | None = None,
    json_body: str | None = None,
    method: str = "GET",
    mode: BodyMode = BodyMode.auto,
) -> Body | None:
    if json_body:
        return Body(content=json_body, content_type=JSON_CONTENT_TYPE)

    if not data:
        return None

    if mode is BodyMode.method:
        content_type = (
            JSON_CONTENT_TYPE if method.upper() in METHODS_WITH_JSON_BODY else None
        )
        return Body(content=data, content_type=content_type)

    try:
        obj = parse_json_object(data)

    except pydantic.ValidationError as error:
        logger.warning("JSON parse failed, sending body as is: %s", error)
        # content type stays form-encoded even for the raw body
        return Body(content=data, content_type=FORM_CONTENT_TYPE)

    return Body(content=json_to_form(obj), content_type=FORM_CONTENT_TYPE)
