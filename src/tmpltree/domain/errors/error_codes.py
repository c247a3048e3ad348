"""에러 코드 정의

tmpltree의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """tmpltree 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        10xx: Tree 구성 관련 에러
        20xx: 템플릿 조회 관련 에러
        30xx: 렌더링 관련 에러
        40xx: Config 관련 에러
        90xx: 기타 에러
    """

    # ==================== Tree 관련 (1000-1999) ====================
    TREE_BUILD_FAILED = 1001
    """템플릿 디렉토리 순회 실패"""

    # ==================== 조회 관련 (2000-2999) ====================
    TEMPLATE_NODE_NOT_FOUND = 2001
    """논리 경로의 디렉토리 부분을 트리에서 찾을 수 없음"""

    TEMPLATE_FILE_NOT_FOUND = 2002
    """디렉토리에 템플릿 파일이 없음"""

    BASE_TEMPLATE_NOT_FOUND = 2003
    """등록되지 않은 베이스 템플릿 이름"""

    # ==================== 렌더링 관련 (3000-3999) ====================
    TEMPLATE_PARSE_FAILED = 3001
    """템플릿 파싱/조합 실패"""

    TEMPLATE_EXECUTION_FAILED = 3002
    """데이터 치환 중 실행 실패"""

    # ==================== Config 관련 (4000-4999) ====================
    CONFIG_LOAD_FAILED = 4001
    """설정 파일 로드 실패"""

    CONFIG_INVALID = 4002
    """설정 파일 형식 오류"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'TREE_BUILD_FAILED (1001)')"""
        return f"{self.name} ({self.value})"

    @property
    def code(self) -> int:
        """에러 코드 숫자 반환"""
        return self.value

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 1000 <= code < 2000:
            return "Tree"
        elif 2000 <= code < 3000:
            return "Lookup"
        elif 3000 <= code < 4000:
            return "Render"
        elif 4000 <= code < 5000:
            return "Config"
        else:
            return "Other"
