"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 JSON 형식 로그 출력,
템플릿 경로 등 메타데이터를 로그에 함께 기록합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_PREFIX = "tmpltree"


def get_default_log_dir() -> Path:
    """
    기본 로그 디렉토리 경로 반환 (~/.tmpltree/logs)

    Returns:
        로그 디렉토리 경로
    """
    return Path.home() / ".tmpltree" / "logs"


def _configure_default_structlog() -> None:
    """
    configure_structlog() 호출 전 기본 설정

    structlog 기본값은 stdout으로 출력하므로, 라이브러리로 사용할 때
    렌더링 결과와 섞이지 않도록 표준 logging으로 보냅니다.
    핸들러가 없으면 표준 logging 규칙대로 WARNING 이상만 stderr에 출력됩니다.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.processors.format_exc_info,
            JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 ~/.tmpltree/logs 사용)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)

    Example:
        >>> configure_structlog(log_dir=None, log_level="INFO", enable_json=True)
        >>> logger = get_logger(__name__, component="TemplateManager")
        >>> logger.info("Template rendered", template_path="pages/index")
    """
    log_path = Path(log_dir) if log_dir else get_default_log_dir()
    log_path.mkdir(parents=True, exist_ok=True)

    # 프로세서 체인 설정
    processors = [
        structlog.contextvars.merge_contextvars,  # context vars 병합
        structlog.stdlib.add_logger_name,  # 로거 이름 추가
        add_log_level,  # 로그 레벨 추가
        structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 타임스탬프
        structlog.stdlib.PositionalArgumentsFormatter(),  # 위치 인자 포맷팅
        structlog.processors.StackInfoRenderer(),  # 스택 정보 렌더링
        structlog.processors.format_exc_info,  # 예외 정보 포맷팅
        structlog.processors.UnicodeDecoder(),  # 유니코드 디코딩
    ]

    if enable_json:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 표준 logging 설정
    # 메인 로그: 10MB (모든 레벨의 로그)
    # 에러 로그: 5MB (ERROR 이상만)
    # 디버그 로그: 20MB (DEBUG 레벨일 때만)
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[
            logging.handlers.RotatingFileHandler(
                str(log_path / f"{LOG_FILE_PREFIX}.log"),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8"
            ),
            logging.StreamHandler(),  # 콘솔 출력 (stderr)
        ],
        force=True  # 기존 설정 덮어쓰기
    )

    # 에러 로그 전용 핸들러 추가
    error_handler = logging.handlers.RotatingFileHandler(
        str(log_path / f"{LOG_FILE_PREFIX}-error.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    logging.getLogger().addHandler(error_handler)

    # DEBUG 레벨이 활성화된 경우 디버그 로그 파일 추가
    if log_level.upper() == "DEBUG":
        debug_handler = logging.handlers.RotatingFileHandler(
            str(log_path / f"{LOG_FILE_PREFIX}-debug.log"),
            maxBytes=20 * 1024 * 1024,  # 20MB
            backupCount=3,
            encoding="utf-8"
        )
        debug_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(debug_handler)


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)
                  예: component, template_path 등

    Returns:
        BoundLogger 인스턴스 (메타데이터가 바인딩된 로거)

    Example:
        >>> logger = get_logger(__name__, component="TreeBuilder")
        >>> logger.debug("Template tree built", nodes=7, files=5)
        # Output (JSON): {"event": "Template tree built", "component": "TreeBuilder",
        #                 "nodes": 7, "files": 5, "level": "debug", ...}
    """
    if not structlog.is_configured():
        _configure_default_structlog()

    # 지연 프록시: 모듈 import 이후의 configure_structlog() 설정도 반영됨
    return structlog.get_logger(name, **context)
