"""Shared fixtures."""

import logging
from collections.abc import Iterator

import pytest

from eitherkit.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Reload settings from the (monkeypatched) environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
    logging.getLogger("eitherkit").setLevel(logging.NOTSET)


class CallCounter:
    """Callable recording every argument it was invoked with."""

    def __init__(self, result: object = None) -> None:
        self.calls: list[object] = []
        self._result = result

    def __call__(self, *args: object) -> object:
        self.calls.append(args[0] if len(args) == 1 else args)
        return self._result


@pytest.fixture
def counter() -> type[CallCounter]:
    return CallCounter
