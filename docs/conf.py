# Configuration file for the Sphinx documentation builder.

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))


# -- Project information -----------------------------------------------------

project = 'revparty'
copyright = '2026, revparty authors'
author = 'revparty authors'


# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'recommonmark',
]

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinxdoc'
html_static_path = ['_static']
