from typing import TypeAlias, TypeVar

T = TypeVar('T')

KPerm: TypeAlias = tuple[T, ...]
