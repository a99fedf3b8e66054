"""
lifeblog
========

Static-site generator for a personal blog.

Builds the home page and one page per article from Markdown/MDX files
with YAML front matter, using Jinja2 templates, and ships two
client-side islands: the dark-mode switch and an embedded WebAssembly
canvas demo.

Main Components:
    - content: Article parsing and collection sorting
    - site: Markdown rendering, head metadata, templates, builder
    - islands: Theme state store, dark-mode switch, embed bridge
    - core: Logging, exceptions, paths, configuration
    - cli: ``lifeblog`` command line (build, list, new, serve)
"""

__version__ = "1.0.0"
