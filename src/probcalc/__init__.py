"""
probcalc
========

Probability mass/density functions, cumulative probabilities and summary
statistics for the Poisson, Hypergeometric, Continuous Uniform and Normal
distributions, with numerically stable combinatorics and a closed-form
error function.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .families.builtins.continuous.normal import (
    normal_cdf,
    normal_metrics,
    normal_pdf,
    normal_pdf_curve,
    normal_probability_between,
    z_score,
)
from .families.builtins.continuous.uniform import (
    continuous_uniform_cdf,
    continuous_uniform_mean,
    continuous_uniform_metrics,
    continuous_uniform_pdf,
    continuous_uniform_pdf_outline,
    continuous_uniform_probability_in_range,
    continuous_uniform_std_dev,
    continuous_uniform_variance,
)
from .families.builtins.discrete.hypergeometric import (
    hypergeometric_cdf,
    hypergeometric_mean,
    hypergeometric_pmf,
    hypergeometric_probabilities,
    hypergeometric_std_dev,
    hypergeometric_support,
    hypergeometric_variance,
)
from .families.builtins.discrete.poisson import (
    poisson_cdf,
    poisson_mean,
    poisson_pmf,
    poisson_probabilities,
    poisson_std_dev,
    poisson_variance,
)
from .special import *
from .special import __all__ as _special_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("probcalc")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_special_all,
    *_types_all,
    # poisson
    "poisson_cdf",
    "poisson_mean",
    "poisson_pmf",
    "poisson_probabilities",
    "poisson_std_dev",
    "poisson_variance",
    # hypergeometric
    "hypergeometric_cdf",
    "hypergeometric_mean",
    "hypergeometric_pmf",
    "hypergeometric_probabilities",
    "hypergeometric_std_dev",
    "hypergeometric_support",
    "hypergeometric_variance",
    # continuous uniform
    "continuous_uniform_cdf",
    "continuous_uniform_mean",
    "continuous_uniform_metrics",
    "continuous_uniform_pdf",
    "continuous_uniform_pdf_outline",
    "continuous_uniform_probability_in_range",
    "continuous_uniform_std_dev",
    "continuous_uniform_variance",
    # normal
    "normal_cdf",
    "normal_metrics",
    "normal_pdf",
    "normal_pdf_curve",
    "normal_probability_between",
    "z_score",
]

del _distr_all
del _errors_all
del _family_all
del _special_all
del _types_all
