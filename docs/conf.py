#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import alabaster

from mailchars import __version__, version_info


project = 'mailchars'
copyright = '2026, mailchars authors'
version = __version__
release = '.'.join(str(x) for x in version_info[:2])

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.intersphinx',
]
source_suffix = '.rst'
master_doc = 'index'
html_theme = 'alabaster'
html_theme_path = [alabaster.get_path()]
html_theme_options = {
    'description': 'Mail grammar character classification',
}

intersphinx_mapping = {
    'python': ('http://docs.python.org/', None),
}
