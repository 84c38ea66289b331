from __future__ import annotations
from typing import Any, Literal, TypeVar, Union


__all__ = (
    'MISSING',
    'MissingOr',
)


class _MissingType:
    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(self, _: Any) -> _MissingType: # noqa: ANN401
        return self


MISSING = _MissingType()

T = TypeVar('T')
MissingOr = Union[T, _MissingType]
