"""에러 핸들러

tmpltree의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class TemplateTreeError(Exception):
    """tmpltree의 기본 예외 클래스

    모든 tmpltree 커스텀 예외는 이 클래스를 상속합니다.
    호출자는 메시지를 파싱하지 않고 예외 타입과 context로 분기합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise TemplateTreeError(
        ...     ErrorCode.TEMPLATE_FILE_NOT_FOUND,
        ...     file_name="index.html"
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error)

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅/CLI 출력용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "TEMPLATE_FILE_NOT_FOUND",
                "error_number": 2002,
                "category": "Lookup",
                "message": "template file not found: index.html",
                "context": {"file_name": "index.html"}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        """에러를 문자열로 반환"""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """에러의 상세 표현 반환"""
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


class FilesystemError(TemplateTreeError):
    """템플릿 디렉토리 순회/읽기 실패"""

    @property
    def root_dir(self) -> Optional[str]:
        return self.context.get("root_dir")


class TemplateNodeNotFoundError(TemplateTreeError):
    """논리 경로의 디렉토리 부분이 트리에 없음"""

    @property
    def template_path(self) -> Optional[str]:
        return self.context.get("template_path")


class TemplateFileNotFoundError(TemplateTreeError):
    """디렉토리는 있으나 템플릿 파일이 없음"""

    @property
    def file_name(self) -> Optional[str]:
        return self.context.get("file_name")


class BaseTemplateNotFoundError(TemplateTreeError):
    """베이스 템플릿 이름이 매핑에 없음"""

    @property
    def base_template_name(self) -> Optional[str]:
        return self.context.get("base_template_name")


class TemplateParseError(TemplateTreeError):
    """렌더링 엔진이 두 템플릿 소스를 파싱/조합하지 못함"""

    @property
    def sources(self) -> Optional[list]:
        return self.context.get("sources")


class TemplateExecutionError(TemplateTreeError):
    """파싱은 성공했으나 데이터 치환 중 실패"""

    @property
    def template_path(self) -> Optional[str]:
        return self.context.get("template_path")


class ConfigError(TemplateTreeError):
    """Config 관련 에러"""

    @property
    def file_path(self) -> Optional[str]:
        return self.context.get("file_path")


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    ErrorCode.TREE_BUILD_FAILED: FilesystemError,
    ErrorCode.TEMPLATE_NODE_NOT_FOUND: TemplateNodeNotFoundError,
    ErrorCode.TEMPLATE_FILE_NOT_FOUND: TemplateFileNotFoundError,
    ErrorCode.BASE_TEMPLATE_NOT_FOUND: BaseTemplateNotFoundError,
    ErrorCode.TEMPLATE_PARSE_FAILED: TemplateParseError,
    ErrorCode.TEMPLATE_EXECUTION_FAILED: TemplateExecutionError,
    ErrorCode.CONFIG_LOAD_FAILED: ConfigError,
    ErrorCode.CONFIG_INVALID: ConfigError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> TemplateTreeError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 TemplateTreeError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     build(root_dir)
        ... except OSError as e:
        ...     raise handle_error(
        ...         ErrorCode.TREE_BUILD_FAILED,
        ...         original_error=e,
        ...         root_dir=str(root_dir)
        ...     )
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, TemplateTreeError)

    exception = error_class(
        error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from tmpltree.infrastructure.logging import get_logger
        logger = get_logger(__name__)

        # 조회 실패는 호출자 입력 문제이므로 warning, 나머지는 error
        if error_code.category == "Lookup":
            logger.warning(
                exception.message,
                error_code=error_code.name,
                **exception.context
            )
        else:
            logger.error(
                exception.message,
                error_code=error_code.name,
                **exception.context,
                exc_info=original_error
            )

    return exception
