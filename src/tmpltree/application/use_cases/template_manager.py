"""
템플릿 관리자 Use Case

TemplateManager: 템플릿 트리에서 논리 경로를 해석하고
베이스 템플릿과 조합하여 렌더링합니다.
"""

import io
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from ..ports.template_port import ITemplateEngine
from ...domain.errors import ErrorCode, handle_error
from ...domain.models import TemplateNode
from ...infrastructure.logging import get_logger
from ...infrastructure.template import Jinja2TemplateEngine

logger = get_logger(__name__, component="TemplateManager")

TEMPLATE_EXTENSION = ".html"


class TemplateManager:
    """
    템플릿 관리자

    구성 후 트리와 베이스 템플릿 매핑은 읽기 전용으로 취급합니다.
    락이 없으므로 여러 스레드에서 공유할 경우 구성이 끝난 뒤에만 공유해야 합니다.

    Attributes:
        root: 템플릿 트리 루트 노드
        base_templates: 베이스 템플릿 이름 → 파일 경로
        template_engine: 렌더링 엔진
    """

    def __init__(
        self,
        root: TemplateNode,
        base_templates: Dict[str, Union[str, Path]],
        template_engine: Optional[ITemplateEngine] = None
    ):
        """
        Args:
            root: build_template_tree()로 만든 루트 노드
            base_templates: 베이스 템플릿 이름 → 파일 경로 (존재 여부는 렌더링 시 확인)
            template_engine: 렌더링 엔진 (기본값: Jinja2TemplateEngine)
        """
        self.root = root
        self.base_templates = base_templates
        self.template_engine = template_engine or Jinja2TemplateEngine()

    def resolve(self, template_path: str) -> Path:
        """
        논리 템플릿 경로를 파일 경로로 해석

        "pages/users/index" → <pages 노드 경로>/users/index.html

        Args:
            template_path: "/"로 구분된 논리 경로 (마지막 세그먼트는 확장자 없는 파일명)

        Returns:
            템플릿 파일 경로

        Raises:
            TemplateNodeNotFoundError: 디렉토리 부분을 트리에서 찾을 수 없는 경우
            TemplateFileNotFoundError: 디렉토리에 파일이 없는 경우
        """
        parts = template_path.split("/")
        node = self.root.get_node(*parts[:-1])
        if node is None:
            raise handle_error(
                ErrorCode.TEMPLATE_NODE_NOT_FOUND,
                template_path=template_path,
            )

        file_name = parts[-1] + TEMPLATE_EXTENSION
        if not node.has_file(file_name):
            raise handle_error(
                ErrorCode.TEMPLATE_FILE_NOT_FOUND,
                file_name=file_name,
                template_path=template_path,
            )

        return node.path / file_name

    def render(
        self,
        template_path: str,
        base_template_name: str,
        writer: TextIO,
        data: Any = None
    ) -> None:
        """
        페이지 템플릿을 베이스 템플릿과 조합하여 렌더링

        Args:
            template_path: 논리 템플릿 경로 (예: "pages/users/index")
            base_template_name: 베이스 템플릿 이름
            writer: 출력 대상
            data: 템플릿 데이터

        Raises:
            TemplateNodeNotFoundError: 디렉토리 부분을 찾을 수 없는 경우
            TemplateFileNotFoundError: 템플릿 파일이 없는 경우
            BaseTemplateNotFoundError: 베이스 템플릿 이름이 없는 경우
            TemplateParseError: 템플릿 파싱/조합 실패 시
            TemplateExecutionError: 데이터 치환 실패 시
        """
        full_path = self.resolve(template_path)

        base_template_path = self.base_templates.get(base_template_name)
        if base_template_path is None:
            raise handle_error(
                ErrorCode.BASE_TEMPLATE_NOT_FOUND,
                base_template_name=base_template_name,
            )

        self.template_engine.render([Path(base_template_path), full_path], data, writer)

        logger.info(
            "Template rendered",
            template_path=template_path,
            base_template=base_template_name,
        )

    def render_to_string(
        self,
        template_path: str,
        base_template_name: str,
        data: Any = None
    ) -> str:
        """
        렌더링 결과를 문자열로 반환

        Args:
            template_path: 논리 템플릿 경로
            base_template_name: 베이스 템플릿 이름
            data: 템플릿 데이터

        Returns:
            렌더링된 문자열
        """
        buffer = io.StringIO()
        self.render(template_path, base_template_name, buffer, data)
        return buffer.getvalue()
