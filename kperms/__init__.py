from kperms._config import get_eager_limit, set_eager_limit
from kperms.kpermute import kpermute
from kperms.kpermute_core import KPGenerator, kperms, n_kperms
from kperms.kptypes import KPerm, T

__all__ = [
    "KPGenerator", "KPerm", "T", "get_eager_limit", "kpermute", "kperms",
    "n_kperms", "set_eager_limit"
]
