"""
Application Ports (Interfaces)

External dependency interfaces (Dependency Inversion Principle)
Implemented by Infrastructure layer
"""

from .template_port import ITemplateEngine, ITemplateManagerFactory

__all__ = [
    "ITemplateEngine",
    "ITemplateManagerFactory",
]
