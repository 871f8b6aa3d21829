import os
import sys

# Make the package importable without installing
sys.path.insert(0, os.path.abspath(".."))

project   = "meandiff"
copyright = "2025, meandiff contributors"
author    = "meandiff contributors"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",       # NumPy / Google docstring styles
    "sphinx.ext.mathjax",        # formulas in the generating-process docs
    "sphinx_autodoc_typehints",  # render type hints from annotations
]

html_theme = "sphinx_rtd_theme"

autodoc_member_order    = "bysource"
autodoc_typehints       = "description"

napoleon_use_param  = True
napoleon_use_rtype  = False
