from typing import Iterable

from kperms._config import get_eager_limit
from kperms.kpermute_core import KPGenerator, _kpwrap, n_kperms
from kperms.kptypes import KPerm, T


def _drain(elements: list[T], k: int) -> tuple[KPerm, ...]:
    count, limit = n_kperms(len(elements), k), get_eager_limit()
    if count > limit:
        raise ValueError(
            f"{count} arrangements exceed the eager limit of {limit}; "
            f"iterate kperms() instead"
        )
    return tuple(KPGenerator(elements, k))


def kpermute(elements: Iterable[T], k: int) -> tuple[KPerm, ...]:
    # invalid k yields no arrangements rather than an absent result
    res = _kpwrap(_drain, elements, k)
    return () if res is None else res
