"""
tmpltree - 템플릿 디렉토리 색인 및 렌더링

템플릿 디렉토리(layouts, pages, partials)를 메모리 트리로 색인하고,
논리 경로로 지정한 페이지 템플릿을 베이스 템플릿과 조합하여 렌더링합니다.

아키텍처:
- domain: 템플릿 트리 모델, 트리 구성 서비스, 에러 정의 (순수 Python)
- application: TemplateManager Use Case 및 Ports (인터페이스)
- infrastructure: 외부 의존성 구현 (Jinja2, structlog, Config)
- presentation: CLI (click, rich)
"""

__version__ = "1.0.0"

from .domain.models import TemplateNode, REQUIRED_FOLDERS
from .domain.services import build_template_tree
from .domain.errors import (
    ErrorCode,
    TemplateTreeError,
    FilesystemError,
    TemplateNodeNotFoundError,
    TemplateFileNotFoundError,
    BaseTemplateNotFoundError,
    TemplateParseError,
    TemplateExecutionError,
    ConfigError,
)
from .application.ports import ITemplateEngine, ITemplateManagerFactory
from .application.use_cases import (
    TemplateManager,
    DefaultTemplateManagerFactory,
    new_template_manager,
)
from .infrastructure.template import Jinja2TemplateEngine

__all__ = [
    "TemplateNode",
    "REQUIRED_FOLDERS",
    "build_template_tree",
    "ErrorCode",
    "TemplateTreeError",
    "FilesystemError",
    "TemplateNodeNotFoundError",
    "TemplateFileNotFoundError",
    "BaseTemplateNotFoundError",
    "TemplateParseError",
    "TemplateExecutionError",
    "ConfigError",
    "ITemplateEngine",
    "ITemplateManagerFactory",
    "TemplateManager",
    "DefaultTemplateManagerFactory",
    "new_template_manager",
    "Jinja2TemplateEngine",
]
