# Configuration file for the Sphinx documentation builder.
#
# -- Path setup --------------------------------------------------------------

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))


# -- Project information -----------------------------------------------------

project = "Formatted Text"

# The full version, including alpha/beta/rc tags
from formatted_text import __version__

release = __version__


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "numpydoc",
]

templates_path = []

exclude_patterns = []

# Fixes numpydoc autosummary errors
numpydoc_show_class_members = False

# Order members in source order, not alphabetically
autodoc_member_order = "bysource"

# Pull in references to other Python code's docs
intersphinx_mapping = {
    "python": ("http://docs.python.org/3", None),
    "peggie": ("https://peggie.readthedocs.io/en/latest/", None),
}

# -- Options for HTML output -------------------------------------------------

html_theme = "nature"
