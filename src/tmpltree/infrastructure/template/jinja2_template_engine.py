"""
Jinja2 기반 템플릿 엔진 구현

베이스 템플릿과 페이지 템플릿을 Jinja2 상속으로 조합하여 렌더링합니다.
베이스 템플릿은 {% block %}으로 슬롯을 정의하고, 페이지 템플릿은
같은 이름의 블록을 정의하여 슬롯을 채웁니다.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, TextIO, Tuple

from jinja2 import (
    Environment,
    FunctionLoader,
    StrictUndefined,
    Template as Jinja2Template,
    TemplateNotFound,
    TemplateSyntaxError,
    Undefined,
    nodes,
)

from ...application.ports.template_port import ITemplateEngine
from ...domain.errors import ErrorCode, handle_error
from ..logging import get_logger

logger = get_logger(__name__, component="Jinja2TemplateEngine")

SOURCE_NAME_PREFIX = "source"


class Jinja2TemplateEngine(ITemplateEngine):
    """
    Jinja2 기반 템플릿 렌더링 엔진

    소스 목록의 각 템플릿이 바로 앞 템플릿을 상속(extends)하도록 조합합니다.
    첫 번째 소스가 바깥 구조가 되며, 렌더링 결과는 모두 성공한 뒤에만
    writer에 한 번에 기록됩니다.
    """

    def __init__(self, autoescape: bool = True, strict_undefined: bool = True):
        """
        Args:
            autoescape: HTML 자동 이스케이핑 여부
            strict_undefined: 정의되지 않은 변수 참조 시 실행 실패 여부
        """
        self.autoescape = autoescape
        self.strict_undefined = strict_undefined

    def render(
        self,
        sources: Sequence[Path],
        data: Any,
        writer: TextIO
    ) -> None:
        """
        템플릿 소스들을 조합하여 렌더링

        Args:
            sources: 템플릿 파일 경로 목록 (베이스 먼저)
            data: 템플릿 데이터 (매핑, 속성을 가진 객체, 또는 None)
            writer: 출력 대상

        Raises:
            TemplateParseError: 소스를 읽거나 파싱/조합하지 못한 경우
            TemplateExecutionError: 데이터 치환 또는 출력 중 실패한 경우
        """
        paths = [Path(source) for source in sources]
        source_names = [str(path) for path in paths]
        if not paths:
            raise handle_error(
                ErrorCode.TEMPLATE_PARSE_FAILED,
                sources=source_names,
                error="템플릿 소스가 없습니다",
            )

        # 1. 소스 읽기 및 파싱
        try:
            template = self._compose(paths)
        except (OSError, UnicodeDecodeError, TemplateSyntaxError, TemplateNotFound) as e:
            raise handle_error(
                ErrorCode.TEMPLATE_PARSE_FAILED,
                original_error=e,
                sources=source_names,
            ) from e

        # 2. 렌더링 (버퍼에 먼저 렌더링)
        try:
            rendered = template.render(self._build_context(data))
        except (TemplateSyntaxError, TemplateNotFound) as e:
            # 상속/include 대상은 렌더링 시점에 로드됨
            raise handle_error(
                ErrorCode.TEMPLATE_PARSE_FAILED,
                original_error=e,
                sources=source_names,
            ) from e
        except Exception as e:
            raise handle_error(
                ErrorCode.TEMPLATE_EXECUTION_FAILED,
                original_error=e,
                template_path=source_names[-1],
            ) from e

        # 3. 출력
        try:
            writer.write(rendered)
        except (OSError, ValueError) as e:
            raise handle_error(
                ErrorCode.TEMPLATE_EXECUTION_FAILED,
                original_error=e,
                template_path=source_names[-1],
            ) from e

        logger.debug("Templates rendered", sources=source_names, size=len(rendered))

    def _compose(self, paths: List[Path]) -> Jinja2Template:
        """
        소스들을 상속 체인으로 조합한 Jinja2 템플릿 생성

        source1은 source0을, source2는 source1을 상속합니다.
        """
        loaded: Dict[str, Tuple[str, str]] = {}
        env = self._create_environment(loaded)
        for index, path in enumerate(paths):
            with open(path, "r", encoding="utf-8") as f:
                source = f.read()
            if index > 0:
                self._check_no_extends(env, source, path)
                # 줄 번호가 바뀌지 않도록 같은 줄에 extends 추가
                parent = f"{SOURCE_NAME_PREFIX}{index - 1}"
                source = f'{{% extends "{parent}" %}}' + source
            loaded[f"{SOURCE_NAME_PREFIX}{index}"] = (source, str(path))

        # 모든 소스를 미리 컴파일하여 문법 오류를 파싱 단계에서 발견
        template = None
        for name in loaded:
            template = env.get_template(name)
        return template

    @staticmethod
    def _check_no_extends(env: Environment, source: str, path: Path) -> None:
        """상속 체인은 엔진이 만들므로 베이스 이후 소스의 자체 extends는 조합 불가"""
        extends = env.parse(source, filename=str(path)).find(nodes.Extends)
        if extends is not None:
            raise TemplateSyntaxError(
                "page template must not use {% extends %}; the base template is composed automatically",
                extends.lineno,
                filename=str(path),
            )

    def _create_environment(self, loaded: Dict[str, Tuple[str, str]]) -> Environment:
        def load(name: str) -> Optional[Tuple[str, str, Callable[[], bool]]]:
            if name not in loaded:
                return None
            source, filename = loaded[name]
            return source, filename, lambda: True

        return Environment(
            loader=FunctionLoader(load),
            autoescape=self.autoescape,
            undefined=StrictUndefined if self.strict_undefined else Undefined,
        )

    @staticmethod
    def _build_context(data: Any) -> Dict[str, Any]:
        """
        템플릿 컨텍스트 생성

        - None: 빈 컨텍스트
        - 매핑: 키가 템플릿 변수
        - 객체: 공개 속성이 템플릿 변수
        """
        if data is None:
            return {}
        if isinstance(data, Mapping):
            return dict(data)
        if hasattr(data, "__dict__"):
            return {
                key: value
                for key, value in vars(data).items()
                if not key.startswith("_")
            }
        raise TypeError(f"템플릿 데이터로 사용할 수 없는 타입입니다: {type(data).__name__}")
