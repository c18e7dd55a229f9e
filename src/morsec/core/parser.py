from abc import abstractmethod
from typing import Callable, Generic, TypeVar

from .result import Result
from .types import Cursor

A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[Cursor], Result[A_co]]


class ParseObj(Generic[A_co]):
    @abstractmethod
    def parse_fn(self, cursor: Cursor) -> Result[A_co]:
        ...

    def to_fn(self) -> ParseFn[A_co]:
        return self.parse_fn
