"""
Template Infrastructure

Jinja2 template engine implementation
"""

from .jinja2_template_engine import Jinja2TemplateEngine

__all__ = [
    "Jinja2TemplateEngine",
]
