"""
Domain Services

템플릿 디렉토리를 트리로 색인하는 순수 도메인 로직
"""

from .tree_builder import build_template_tree

__all__ = ["build_template_tree"]
