"""
구조화된 로깅 인프라

structlog 기반 로깅 시스템
"""

from .structured_logger import configure_structlog, get_logger, get_default_log_dir

__all__ = [
    "configure_structlog",
    "get_logger",
    "get_default_log_dir",
]
