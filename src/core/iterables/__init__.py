"""
Core iterables для seqmath

Ленивые трансформеры последовательностей и однопроходные числовые свёртки.
Этот слой не зависит от core.math.
"""

# Sequence Transformers
from src.core.iterables.transformers import (
    ButFirst,
    EmptySequenceError,
    ReversedView,
    Stitched,
    but_first,
    in_pairs,
    reversed_view,
    sort_lists_simultaneously,
    stitched,
    two_at_a_time,
    unzipped,
    zip_to_list,
    zipped,
)

# Reductions
from src.core.iterables.reductions import (
    get_arithmetic_mean,
    get_geometric_mean,
    get_maximum,
    get_minimum,
    get_minimum_and_maximum,
    get_population_standard_deviation,
    get_product,
    get_sample_standard_deviation,
    get_sum,
    map_linearly,
)

__all__ = [
    # Transformers: Exceptions
    "EmptySequenceError",
    # Transformers: Types
    "ButFirst",
    "ReversedView",
    "Stitched",
    # Transformers: Functions
    "but_first",
    "in_pairs",
    "reversed_view",
    "sort_lists_simultaneously",
    "stitched",
    "two_at_a_time",
    "unzipped",
    "zip_to_list",
    "zipped",
    # Reductions
    "get_arithmetic_mean",
    "get_geometric_mean",
    "get_maximum",
    "get_minimum",
    "get_minimum_and_maximum",
    "get_population_standard_deviation",
    "get_product",
    "get_sample_standard_deviation",
    "get_sum",
    "map_linearly",
]
