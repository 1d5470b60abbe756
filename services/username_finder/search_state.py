"""Search states rendered by the UI. Exactly one is active at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Loading:
    keyword: str


@dataclass(frozen=True, slots=True)
class Success:
    """A finished search; `items` may be empty when nothing survived filtering."""

    keyword: str
    items: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True, slots=True)
class Error:
    message: str


SearchState = Union[Idle, Loading, Success, Error]
