"""Pytest configuration and fixtures."""

import logging
import sys
import pytest
from pathlib import Path
from typing import Dict

import structlog

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


BASE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{% block title %}{% endblock %}</title>
</head>
<body>
    {% block content %}{% endblock %}
</body>
</html>
"""

ADMIN_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Admin - {% block title %}{% endblock %}</title>
</head>
<body>
    <h1>Admin Panel</h1>
    {% block content %}{% endblock %}
</body>
</html>
"""

TEST_PAGE = """{% block title %}Test Page{% endblock %}
{% block content %}
<h2>Test Page</h2>
<p>Hello, {{ name }}!</p>
{% endblock %}
"""


def pytest_configure(config):
    """커스텀 마커 등록"""
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "integration: 통합 테스트")


def create_test_dir_structure(root: Path) -> None:
    """
    테스트용 템플릿 디렉토리 생성

    layouts/base.html
    pages/about.html, pages/contact.html, pages/index.html
    pages/users/index.html
    partials/ (빈 폴더)
    """
    for folder in ("layouts", "pages", "partials", "pages/users"):
        (root / folder).mkdir(parents=True, exist_ok=True)

    for file_path in (
        "layouts/base.html",
        "pages/about.html",
        "pages/contact.html",
        "pages/index.html",
        "pages/users/index.html",
    ):
        (root / file_path).write_text("", encoding="utf-8")


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """기본 구조를 가진 템플릿 루트 디렉토리"""
    root = tmp_path / "templates"
    root.mkdir()
    create_test_dir_structure(root)
    return root


@pytest.fixture
def render_root(template_root: Path) -> Path:
    """베이스/관리자 레이아웃과 테스트 페이지가 들어 있는 템플릿 루트"""
    (template_root / "layouts" / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    (template_root / "layouts" / "admin.html").write_text(ADMIN_TEMPLATE, encoding="utf-8")
    (template_root / "pages" / "test.html").write_text(TEST_PAGE, encoding="utf-8")
    return template_root


@pytest.fixture
def base_templates(render_root: Path) -> Dict[str, Path]:
    """베이스 템플릿 이름 → 경로"""
    return {
        "base": render_root / "layouts" / "base.html",
        "admin": render_root / "layouts" / "admin.html",
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """테스트 중 추가된 로깅 설정 정리"""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield

    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
