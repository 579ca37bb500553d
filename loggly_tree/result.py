"""Outcome of one asynchronous submission."""

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Failure:
    detail: str


Result = Union[Success, Failure]
Callback = Callable[[Result], None]
