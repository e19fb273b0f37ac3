import operator
from collections.abc import Callable, Generator
from contextlib import AbstractContextManager, contextmanager
from typing import Any, NamedTuple
from urllib.parse import parse_qsl

import pytest

TestFunction = Callable[..., None]


def cases(
    name_position: int,
    *cases: NamedTuple,
) -> Callable[[TestFunction], TestFunction]:
    def wrapper(test_function: TestFunction) -> TestFunction:
        return pytest.mark.parametrize(
            argnames="case",
            argvalues=list(cases),
            ids=operator.itemgetter(name_position),
        )(test_function)

    return wrapper


@contextmanager
def _noop_context_manager() -> Generator[None, None, None]:
    yield


def raises(error: type[BaseException] | None) -> AbstractContextManager[Any]:
    if error is None:
        return _noop_context_manager()

    return pytest.raises(error)


def form_pairs(body: str) -> set[tuple[str, str]]:
    return set(parse_qsl(body, keep_blank_values=True))
