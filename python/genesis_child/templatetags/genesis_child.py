"""
Django template tags for the child theme's document head.

Usage:
    {% load genesis_child %}

    <head>
        <!-- Stylesheet links (main child theme stylesheet first) -->
        {% genesis_styles %}

        <!-- Everything hooked into the head, including the custom header style -->
        {% genesis_head %}
    </head>
"""

from django import template
from django.apps import apps

from genesis_child.header import assemble, render_header_style

register = template.Library()


def _app():
    return apps.get_app_config("genesis_child")


@register.simple_tag
def genesis_head():
    """
    Run the ``render_head`` hook and output what its callbacks wrote.

    Example:
        {% genesis_head %}
        <!-- <style type="text/css">.custom-header .site-header{...}</style> -->
    """
    app = _app()
    return app.extension.render_head(app.hooks)


@register.simple_tag
def genesis_styles():
    """Run the ``enqueue_scripts`` hook and output the stylesheet links."""
    app = _app()
    return app.extension.render_styles(app.hooks)


@register.simple_tag
def genesis_custom_header_style():
    """Output only the custom header style block (empty when nothing is customized)."""
    return render_header_style(assemble(_app().extension.header_settings()))
