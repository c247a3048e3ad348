"""
Application Use Cases

템플릿 트리 조회 및 렌더링 Use Case
"""

from .template_manager import TemplateManager, TEMPLATE_EXTENSION
from .template_manager_factory import DefaultTemplateManagerFactory, new_template_manager

__all__ = [
    "TemplateManager",
    "TEMPLATE_EXTENSION",
    "DefaultTemplateManagerFactory",
    "new_template_manager",
]
