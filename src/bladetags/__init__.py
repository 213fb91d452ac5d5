"""
bladetags - compile custom component tags into Blade directives.

Rewrites ``<x-card title="Hi" />``-style tags, named ``<slot>`` regions and
``<x-context>`` blocks into ``@component``/``@slot`` directives for a
downstream template renderer.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
