"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Tree 관련
    ErrorCode.TREE_BUILD_FAILED: (
        "템플릿 디렉토리 '{root_dir}'를 읽는 데 실패했습니다: {error}"
    ),
    # 조회 관련
    ErrorCode.TEMPLATE_NODE_NOT_FOUND: (
        "template node not found for path: {template_path}"
    ),
    ErrorCode.TEMPLATE_FILE_NOT_FOUND: (
        "template file not found: {file_name}"
    ),
    ErrorCode.BASE_TEMPLATE_NOT_FOUND: (
        "base template not found: {base_template_name}"
    ),
    # 렌더링 관련
    ErrorCode.TEMPLATE_PARSE_FAILED: (
        "error parsing template: {error}"
    ),
    ErrorCode.TEMPLATE_EXECUTION_FAILED: (
        "error executing template: {error}"
    ),
    # Config 관련
    ErrorCode.CONFIG_LOAD_FAILED: (
        "설정 파일 '{file_path}'를 로드하는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_INVALID: (
        "설정 파일 '{file_path}'의 형식이 올바르지 않습니다: {error}"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 에러가 발생했습니다: {error}"
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.TEMPLATE_FILE_NOT_FOUND)
        "template file not found: {file_name}"
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(
        ...     ErrorCode.TEMPLATE_FILE_NOT_FOUND,
        ...     file_name="index.html"
        ... )
        "template file not found: index.html"
    """
    template = get_error_message(error_code)

    # 원본 context를 변경하지 않도록 복사본에 error_code 추가
    values = dict(context)
    values["error_code"] = error_code

    try:
        return template.format(**values)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(values.keys())}]"
        )
