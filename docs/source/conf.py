import sys
from datetime import date
from pathlib import Path

SRC = Path(__file__).resolve().parents[2] / "src"
sys.path.insert(0, str(SRC))

project = "probcalc"
author = "PySATL project"
copyright = f"{date.today().year}, {author}"
release = version = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
    "myst_nb",
]
source_suffix = {".rst": "restructuredtext", ".md": "markdown"}
exclude_patterns = ["_build"]

# NumPy docstrings only
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

autosummary_generate = True
autodoc_member_order = "bysource"
autodoc_default_options = {"undoc-members": True, "show-inheritance": True}
autodoc_typehints = "description"
autodoc_type_aliases = {
    name: f"probcalc.types.{name}"
    for name in ("Number", "NumericArray", "BoolArray", "Kind", "EuclideanDistributionType")
} | {
    "Parametrization": "probcalc.families.parametrizations.Parametrization",
    "ParametricFamily": "probcalc.families.parametric_family.ParametricFamily",
    "Support": "probcalc.distributions.support.Support",
    "DiscreteMetrics": "probcalc.distributions.metrics.DiscreteMetrics",
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

myst_enable_extensions = ["dollarmath", "amsmath"]
nb_execution_mode = "off"

html_theme = "sphinx_rtd_theme"
html_theme_options = {"navigation_depth": 3}

copybutton_prompt_text = r">>> |\.\.\. "
copybutton_prompt_is_regexp = True
