"""
Free functions for generating random variates.

Each ``r_xxx(params..., stream)`` validates its parameters, draws one
uniform from the supplied stream and applies the family's quantile
function, the same one used by the matching Distribution and RVariable.
The stream argument is required. Nothing here keeps state between calls.

Also provides weighted and unweighted selection from sequences and
in-place sampling without replacement.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from pysimrv.distributions.base import (
    check_integer,
    check_open_unit_interval,
    check_positive,
    check_range,
    check_unit_interval,
)
from pysimrv.distributions.beta import beta_inv_cdf, generalized_beta_inv_cdf, pearson_type6_inv_cdf
from pysimrv.distributions.continuous import (
    check_triangular,
    exponential_inv_cdf,
    johnson_b_inv_cdf,
    laplace_inv_cdf,
    log_logistic_inv_cdf,
    lognormal_inv_cdf,
    normal_inv_cdf,
    triangular_inv_cdf,
    uniform_inv_cdf,
    weibull_inv_cdf,
)
from pysimrv.distributions.discrete import (
    bernoulli_inv_cdf,
    binomial_inv_cdf,
    duniform_inv_cdf,
    geometric_inv_cdf,
    negative_binomial_inv_cdf,
    poisson_inv_cdf,
)
from pysimrv.distributions.gamma import chi_squared_inv_cdf, gamma_inv_cdf, pearson_type5_inv_cdf
from pysimrv.exceptions import InvalidParameterError
from pysimrv.rng import RNStreamIfc

T = TypeVar("T")


def _u01(stream: RNStreamIfc) -> float:
    if stream is None:
        raise ValueError("the supplied stream was None")
    return stream.rand_u01()


def r_bernoulli(prob_success: float, stream: RNStreamIfc) -> float:
    check_unit_interval("probability of success", prob_success)
    return bernoulli_inv_cdf(_u01(stream), prob_success)


def r_binomial(prob_success: float, num_trials: int, stream: RNStreamIfc) -> float:
    check_unit_interval("probability of success", prob_success)
    n = check_integer("number of trials", num_trials)
    check_positive("number of trials", n)
    return binomial_inv_cdf(_u01(stream), prob_success, n)


def r_poisson(mean: float, stream: RNStreamIfc) -> float:
    check_positive("mean", mean)
    return poisson_inv_cdf(_u01(stream), mean)


def r_duniform(minimum: int, maximum: int, stream: RNStreamIfc) -> float:
    lo = check_integer("minimum", minimum)
    hi = check_integer("maximum", maximum)
    check_range("minimum", lo, "maximum", hi)
    return duniform_inv_cdf(_u01(stream), lo, hi)


def r_geometric(prob_success: float, stream: RNStreamIfc) -> float:
    check_open_unit_interval("probability of success", prob_success)
    return geometric_inv_cdf(_u01(stream), prob_success)


def r_neg_binomial(prob_success: float, num_successes: float, stream: RNStreamIfc) -> float:
    check_open_unit_interval("probability of success", prob_success)
    check_positive("number of successes", num_successes)
    return negative_binomial_inv_cdf(_u01(stream), prob_success, num_successes)


def r_uniform(minimum: float, maximum: float, stream: RNStreamIfc) -> float:
    check_range("minimum", minimum, "maximum", maximum)
    return uniform_inv_cdf(_u01(stream), minimum, maximum)


def r_normal(mean: float, variance: float, stream: RNStreamIfc) -> float:
    check_positive("variance", variance)
    return normal_inv_cdf(_u01(stream), mean, variance)


def r_lognormal(mean: float, variance: float, stream: RNStreamIfc) -> float:
    check_positive("mean", mean)
    check_positive("variance", variance)
    return lognormal_inv_cdf(_u01(stream), mean, variance)


def r_weibull(shape: float, scale: float, stream: RNStreamIfc) -> float:
    check_positive("shape", shape)
    check_positive("scale", scale)
    return weibull_inv_cdf(_u01(stream), shape, scale)


def r_exponential(mean: float, stream: RNStreamIfc) -> float:
    check_positive("mean", mean)
    return exponential_inv_cdf(_u01(stream), mean)


def r_johnson_b(
    alpha1: float, alpha2: float, minimum: float, maximum: float, stream: RNStreamIfc
) -> float:
    check_positive("alpha2", alpha2)
    check_range("minimum", minimum, "maximum", maximum)
    return johnson_b_inv_cdf(_u01(stream), alpha1, alpha2, minimum, maximum)


def r_log_logistic(shape: float, scale: float, stream: RNStreamIfc) -> float:
    check_positive("shape", shape)
    check_positive("scale", scale)
    return log_logistic_inv_cdf(_u01(stream), shape, scale)


def r_triangular(minimum: float, mode: float, maximum: float, stream: RNStreamIfc) -> float:
    check_triangular(minimum, mode, maximum)
    return triangular_inv_cdf(_u01(stream), minimum, mode, maximum)


def r_gamma(shape: float, scale: float, stream: RNStreamIfc) -> float:
    check_positive("shape", shape)
    check_positive("scale", scale)
    return gamma_inv_cdf(_u01(stream), shape, scale)


def r_chi_squared(dof: float, stream: RNStreamIfc) -> float:
    check_positive("degrees of freedom", dof)
    return chi_squared_inv_cdf(_u01(stream), dof)


def r_pearson_type5(shape: float, scale: float, stream: RNStreamIfc) -> float:
    check_positive("shape", shape)
    check_positive("scale", scale)
    return pearson_type5_inv_cdf(_u01(stream), shape, scale)


def r_beta(alpha1: float, alpha2: float, stream: RNStreamIfc) -> float:
    check_positive("alpha1", alpha1)
    check_positive("alpha2", alpha2)
    return beta_inv_cdf(_u01(stream), alpha1, alpha2)


def r_beta_g(
    alpha1: float, alpha2: float, minimum: float, maximum: float, stream: RNStreamIfc
) -> float:
    """Beta variate rescaled to [minimum, maximum]."""
    check_positive("alpha1", alpha1)
    check_positive("alpha2", alpha2)
    check_range("minimum", minimum, "maximum", maximum)
    return generalized_beta_inv_cdf(_u01(stream), alpha1, alpha2, minimum, maximum)


def r_pearson_type6(alpha1: float, alpha2: float, beta: float, stream: RNStreamIfc) -> float:
    check_positive("alpha1", alpha1)
    check_positive("alpha2", alpha2)
    check_positive("beta", beta)
    return pearson_type6_inv_cdf(_u01(stream), alpha1, alpha2, beta)


def r_laplace(mean: float, scale: float, stream: RNStreamIfc) -> float:
    check_positive("scale", scale)
    return laplace_inv_cdf(_u01(stream), mean, scale)


def is_valid_cdf(cdf: Sequence[float]) -> bool:
    """
    True if ``cdf`` is a valid discrete cumulative distribution.

    The last element must equal 1.0 exactly, every element must lie in
    [0, 1], and the sequence must be non-decreasing.
    """
    if cdf is None:
        raise ValueError("cdf array must not be None")
    if len(cdf) == 0 or cdf[-1] != 1.0:
        return False
    previous = 0.0
    for c in cdf:
        if c < 0.0 or c > 1.0 or c < previous:
            return False
        previous = c
    return True


def randomly_select(seq: Sequence[T], stream: RNStreamIfc, cdf: Sequence[float] | None = None) -> T:
    """
    Pick one element of ``seq``.

    Without ``cdf`` every element is equally likely. With ``cdf`` the
    element at the first cumulative probability >= the uniform draw is
    chosen; ``cdf`` must be valid and as long as ``seq``.
    """
    if seq is None:
        raise ValueError("the sequence to select from must not be None")
    if stream is None:
        raise ValueError("the supplied stream was None")
    if len(seq) == 0:
        raise InvalidParameterError("cannot select from an empty sequence")
    if cdf is None:
        return seq[stream.rand_int(0, len(seq) - 1)]
    if not is_valid_cdf(cdf):
        raise InvalidParameterError(f"invalid cdf: {list(cdf)}")
    if len(cdf) != len(seq):
        raise InvalidParameterError(
            f"cdf length ({len(cdf)}) must match the sequence length ({len(seq)})"
        )
    if len(seq) == 1:
        return seq[0]
    u = stream.rand_u01()
    i = 0
    while cdf[i] < u:
        i += 1
    return seq[i]


def sample_without_replacement(seq: MutableSequence[T], sample_size: int, stream: RNStreamIfc) -> None:
    """
    Move a uniformly random ordered sample of ``sample_size`` elements to the front of ``seq``.

    Partial Fisher-Yates shuffle, in place: for j in 0..sample_size-1 swap
    seq[j] with seq[rand_int(j, n - 1)].
    """
    if seq is None:
        raise ValueError("the sequence to sample from must not be None")
    if stream is None:
        raise ValueError("the supplied stream was None")
    n = len(seq)
    if sample_size > n:
        raise InvalidParameterError(
            f"cannot draw a sample of size {sample_size} from {n} elements without replacement"
        )
    if sample_size < 0:
        raise InvalidParameterError(f"sample size must be >= 0, got {sample_size}")
    for j in range(sample_size):
        i = stream.rand_int(j, n - 1)
        seq[j], seq[i] = seq[i], seq[j]


def permutation(seq: MutableSequence[T], stream: RNStreamIfc) -> None:
    """Randomly permute ``seq`` in place."""
    if seq is None:
        raise ValueError("the sequence to permute must not be None")
    sample_without_replacement(seq, len(seq), stream)
