"""
템플릿 포트 (인터페이스)

ITemplateEngine: 템플릿 렌더링 엔진 인터페이스
ITemplateManagerFactory: TemplateManager 생성 전략 인터페이스
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Sequence, TextIO, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..use_cases.template_manager import TemplateManager


class ITemplateEngine(ABC):
    """
    템플릿 렌더링 엔진 인터페이스

    Infrastructure 계층에서 구현됨 (Jinja2 등)
    """

    @abstractmethod
    def render(
        self,
        sources: Sequence[Path],
        data: Any,
        writer: TextIO
    ) -> None:
        """
        템플릿 소스들을 조합하여 렌더링

        첫 번째 소스가 바깥 구조(베이스 템플릿)를 정의하고,
        이후 소스들이 베이스가 이름으로 참조하는 블록을 채웁니다.
        출력은 렌더링이 모두 성공한 뒤에만 writer에 기록됩니다.

        Args:
            sources: 템플릿 파일 경로 목록 (베이스 먼저)
            data: 템플릿 데이터 (매핑, 속성을 가진 객체, 또는 None)
            writer: 출력 대상

        Raises:
            TemplateParseError: 소스를 읽거나 파싱/조합하지 못한 경우
            TemplateExecutionError: 데이터 치환 중 실패한 경우
        """
        pass


class ITemplateManagerFactory(ABC):
    """
    TemplateManager 생성 전략 인터페이스

    new_template_manager()에 주입하여 생성 방식을 교체합니다 (테스트 대역 등).
    """

    @abstractmethod
    def create(
        self,
        root_dir: Union[str, Path],
        base_templates: Dict[str, Union[str, Path]]
    ) -> "TemplateManager":
        """
        TemplateManager 생성

        Args:
            root_dir: 템플릿 루트 디렉토리
            base_templates: 베이스 템플릿 이름 → 파일 경로

        Returns:
            TemplateManager

        Raises:
            FilesystemError: 트리 구성 실패 시
        """
        pass
