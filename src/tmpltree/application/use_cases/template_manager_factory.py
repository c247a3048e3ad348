"""
TemplateManager Factory

TemplateManager 생성 전략과 생성 진입점을 제공합니다.
생성 방식은 ITemplateManagerFactory로 주입하여 교체할 수 있습니다.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from .template_manager import TemplateManager
from ..ports.template_port import ITemplateEngine, ITemplateManagerFactory
from ...domain.services import build_template_tree
from ...infrastructure.logging import get_logger

logger = get_logger(__name__, component="TemplateManagerFactory")


class DefaultTemplateManagerFactory(ITemplateManagerFactory):
    """
    기본 TemplateManager 생성 전략

    루트 디렉토리에서 템플릿 트리를 구성하고, 베이스 템플릿 매핑은
    검증 없이 그대로 저장합니다 (파일 존재 여부는 렌더링 시 확인).
    """

    def __init__(
        self,
        template_engine: Optional[ITemplateEngine] = None,
        include_empty_dirs: bool = False
    ):
        """
        Args:
            template_engine: 생성할 TemplateManager에 주입할 렌더링 엔진
            include_empty_dirs: 빈 디렉토리도 트리 노드로 만들지 여부
        """
        self.template_engine = template_engine
        self.include_empty_dirs = include_empty_dirs

    def create(
        self,
        root_dir: Union[str, Path],
        base_templates: Dict[str, Union[str, Path]]
    ) -> TemplateManager:
        root = build_template_tree(root_dir, include_empty_dirs=self.include_empty_dirs)
        logger.info(
            "Template manager created",
            root_dir=str(root_dir),
            base_templates=sorted(base_templates),
        )
        return TemplateManager(
            root=root,
            base_templates=base_templates,
            template_engine=self.template_engine,
        )


def new_template_manager(
    root_dir: Union[str, Path],
    base_templates: Dict[str, Union[str, Path]],
    factory: Optional[ITemplateManagerFactory] = None
) -> TemplateManager:
    """
    TemplateManager 생성

    Args:
        root_dir: 템플릿 루트 디렉토리
        base_templates: 베이스 템플릿 이름 → 파일 경로
        factory: 생성 전략 (기본값: DefaultTemplateManagerFactory)

    Returns:
        TemplateManager

    Raises:
        FilesystemError: 트리 구성 실패 시

    Example:
        >>> manager = new_template_manager(
        ...     "templates",
        ...     {"base": "templates/layouts/base.html"}
        ... )
        >>> manager.render("pages/index", "base", sys.stdout, {"name": "World"})
    """
    if factory is None:
        factory = DefaultTemplateManagerFactory()
    return factory.create(root_dir, base_templates)
