from .brute_force import get_regular_factor
from .compact import get_regular_compact
from .divide_conquer import get_regular_divide_conquer
from .geometric import get_regular_fast_geometric
from .ordered_set import get_regular_log_set, get_regular_set

__all__ = [
    "get_regular_compact",
    "get_regular_divide_conquer",
    "get_regular_factor",
    "get_regular_fast_geometric",
    "get_regular_log_set",
    "get_regular_set",
]
