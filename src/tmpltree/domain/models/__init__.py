"""
Domain Models

템플릿 트리 엔티티
"""

from .template_node import (
    TemplateNode,
    REQUIRED_FOLDERS,
    ROOT_NODE_NAME,
    new_template_tree,
)

__all__ = [
    "TemplateNode",
    "REQUIRED_FOLDERS",
    "ROOT_NODE_NAME",
    "new_template_tree",
]
