"""
genesis-child: child theme overrides for Genesis-style Django sites.

Replaces the parent theme's stylesheet loading with a versioned, enqueued
main stylesheet, replaces its custom header style output, and keeps the
parent theme on automatic updates.

Add to INSTALLED_APPS::

    INSTALLED_APPS = [
        ...
        "genesis_child",
    ]

Then in your base template::

    {% load genesis_child %}
    <head>
        {% genesis_styles %}
        {% genesis_head %}
    </head>
"""

from .header import HeaderSettings, HeaderStyleAssembler, assemble, render_header_style

__version__ = "0.1.0"

__all__ = [
    "HeaderSettings",
    "HeaderStyleAssembler",
    "assemble",
    "render_header_style",
]
