"""
Core math modules для seqmath

Численные алгоритмы поверх core.iterables: округление, интегрирование,
экстремумы, линейные отображения, выборка, теория чисел, доходности.
"""

# Rounding
from src.core.math.rounding import (
    find_closest_multiple,
    is_within,
    round_to_decimal_places,
    round_to_significant_figures,
)

# Calculus
from src.core.math.calculus import (
    DEFAULT_DERIVATIVE_DELTA,
    find_approximate_derivative,
    find_approximate_gradient_at_point,
    find_interval_minimum_and_maximum,
    find_local_extrema,
    integrate_approximately,
)

# Linear
from src.core.math.linear import (
    get_gradient,
    get_linear_mapping_function,
    get_sequential_gradients,
    interpolate_linearly,
)

# Sampling
from src.core.math.sampling import (
    SamplingExhaustedError,
    generate_points,
)

# Number Theory
from src.core.math.number_theory import (
    find_common_prime_factors,
    find_greatest_common_factor,
    find_prime_factors,
    simplify_fraction,
)

# Financial
from src.core.math.financial import (
    express_return_over_different_period,
    get_absolute_earning_potential,
    get_downside_deviation,
    get_geometric_average_return,
    get_overall_return,
    get_return,
    get_returns_from_equities,
    get_sortino_ratio,
)

__all__ = [
    # Rounding
    "find_closest_multiple",
    "is_within",
    "round_to_decimal_places",
    "round_to_significant_figures",
    # Calculus: Constants
    "DEFAULT_DERIVATIVE_DELTA",
    # Calculus: Functions
    "find_approximate_derivative",
    "find_approximate_gradient_at_point",
    "find_interval_minimum_and_maximum",
    "find_local_extrema",
    "integrate_approximately",
    # Linear
    "get_gradient",
    "get_linear_mapping_function",
    "get_sequential_gradients",
    "interpolate_linearly",
    # Sampling: Exceptions
    "SamplingExhaustedError",
    # Sampling: Functions
    "generate_points",
    # Number Theory
    "find_common_prime_factors",
    "find_greatest_common_factor",
    "find_prime_factors",
    "simplify_fraction",
    # Financial
    "express_return_over_different_period",
    "get_absolute_earning_potential",
    "get_downside_deviation",
    "get_geometric_average_return",
    "get_overall_return",
    "get_return",
    "get_returns_from_equities",
    "get_sortino_ratio",
]
