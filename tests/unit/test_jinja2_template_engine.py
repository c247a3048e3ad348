"""
Jinja2 템플릿 엔진 단위 테스트

테스트 범위:
- 베이스/페이지 템플릿 블록 조합
- 데이터 컨텍스트 (매핑, 객체, None)
- 파싱 에러 / 실행 에러 분류
- 실패 시 writer에 아무것도 쓰지 않음
"""

import io
from dataclasses import dataclass

import pytest

from tmpltree.domain.errors import (
    ErrorCode,
    TemplateExecutionError,
    TemplateParseError,
)
from tmpltree.infrastructure.template import Jinja2TemplateEngine


@dataclass
class User:
    name: str
    email: str = "user@example.com"


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def layout(tmp_path):
    return _write(
        tmp_path,
        "base.html",
        "<html><title>{% block title %}Default{% endblock %}</title>"
        "<body>{% block content %}{% endblock %}</body></html>",
    )


@pytest.mark.unit
class TestJinja2TemplateEngine:
    """Jinja2TemplateEngine 테스트"""

    def test_render_composes_blocks(self, tmp_path, layout):
        """페이지 블록이 베이스 슬롯을 채우는지 테스트"""
        page = _write(
            tmp_path,
            "page.html",
            "{% block title %}Home{% endblock %}{% block content %}Hello, {{ name }}!{% endblock %}",
        )
        buffer = io.StringIO()

        Jinja2TemplateEngine().render([layout, page], {"name": "World"}, buffer)

        assert buffer.getvalue() == (
            "<html><title>Home</title><body>Hello, World!</body></html>"
        )

    def test_render_text_outside_blocks_not_echoed(self, tmp_path, layout):
        """페이지의 블록 밖 텍스트는 출력되지 않음"""
        page = _write(
            tmp_path,
            "page.html",
            "stray text\n{% block content %}Body{% endblock %}\nmore stray text",
        )
        buffer = io.StringIO()

        Jinja2TemplateEngine().render([layout, page], None, buffer)

        output = buffer.getvalue()
        assert "stray" not in output
        assert "<title>Default</title>" in output
        assert "<body>Body</body>" in output

    def test_render_with_object_data(self, tmp_path, layout):
        """속성을 가진 객체 데이터 테스트"""
        page = _write(
            tmp_path, "page.html", "{% block content %}{{ name }} <{{ email }}>{% endblock %}"
        )
        buffer = io.StringIO()

        Jinja2TemplateEngine(autoescape=False).render([layout, page], User("Alice"), buffer)

        assert "Alice <user@example.com>" in buffer.getvalue()

    def test_render_autoescape(self, tmp_path, layout):
        """HTML 자동 이스케이핑 테스트"""
        page = _write(tmp_path, "page.html", "{% block content %}{{ html }}{% endblock %}")
        buffer = io.StringIO()

        Jinja2TemplateEngine().render([layout, page], {"html": "<b>x</b>"}, buffer)

        assert "&lt;b&gt;x&lt;/b&gt;" in buffer.getvalue()

    def test_render_single_source(self, layout):
        """베이스 템플릿만 렌더링 테스트"""
        buffer = io.StringIO()

        Jinja2TemplateEngine().render([layout], {}, buffer)

        assert buffer.getvalue() == "<html><title>Default</title><body></body></html>"

    def test_render_is_deterministic(self, tmp_path, layout):
        """같은 입력이면 같은 출력"""
        page = _write(tmp_path, "page.html", "{% block content %}{{ items|join(',') }}{% endblock %}")
        engine = Jinja2TemplateEngine()
        outputs = []
        for _ in range(2):
            buffer = io.StringIO()
            engine.render([layout, page], {"items": ["a", "b", "c"]}, buffer)
            outputs.append(buffer.getvalue())

        assert outputs[0] == outputs[1]

    def test_missing_source_raises_parse_error(self, tmp_path, layout):
        """존재하지 않는 베이스 파일은 파싱 에러"""
        page = _write(tmp_path, "page.html", "{% block content %}x{% endblock %}")
        missing = tmp_path / "missing.html"
        buffer = io.StringIO()

        with pytest.raises(TemplateParseError) as exc_info:
            Jinja2TemplateEngine().render([missing, page], {}, buffer)

        assert exc_info.value.error_code == ErrorCode.TEMPLATE_PARSE_FAILED
        assert str(missing) in exc_info.value.sources
        assert buffer.getvalue() == ""

    def test_syntax_error_raises_parse_error(self, tmp_path, layout):
        """문법 오류는 파싱 에러"""
        page = _write(tmp_path, "page.html", "{% block content %}{{ name {% endblock %}")

        with pytest.raises(TemplateParseError):
            Jinja2TemplateEngine().render([layout, page], {"name": "x"}, io.StringIO())

    def test_syntax_error_in_base_raises_parse_error(self, tmp_path):
        """베이스 템플릿 문법 오류도 파싱 에러"""
        base = _write(tmp_path, "base.html", "{% block content %}")
        page = _write(tmp_path, "page.html", "{% block content %}x{% endblock %}")

        with pytest.raises(TemplateParseError):
            Jinja2TemplateEngine().render([base, page], {}, io.StringIO())

    def test_duplicate_block_raises_parse_error(self, tmp_path, layout):
        """같은 블록을 두 번 정의하면 파싱 에러"""
        page = _write(
            tmp_path,
            "page.html",
            "{% block content %}a{% endblock %}{% block content %}b{% endblock %}",
        )

        with pytest.raises(TemplateParseError):
            Jinja2TemplateEngine().render([layout, page], {}, io.StringIO())

    @pytest.mark.parametrize(
        "page_source",
        [
            '{% extends "x" %}{% block title %}T{% endblock %}',
            '{% block title %}T{% endblock %}\n{% extends "base.html" %}',
        ],
    )
    def test_page_with_own_extends_raises_parse_error(self, tmp_path, layout, page_source):
        """자체 extends를 가진 페이지는 베이스와 조합할 수 없으므로 파싱 에러"""
        page = _write(tmp_path, "page.html", page_source)
        buffer = io.StringIO()

        with pytest.raises(TemplateParseError) as exc_info:
            Jinja2TemplateEngine().render([layout, page], {}, buffer)

        assert exc_info.value.error_code == ErrorCode.TEMPLATE_PARSE_FAILED
        assert "extends" in exc_info.value.message
        assert buffer.getvalue() == ""

    def test_unknown_include_raises_parse_error(self, tmp_path, layout):
        """조합에 없는 템플릿 참조는 파싱 에러"""
        page = _write(
            tmp_path, "page.html", '{% block content %}{% include "nav.html" %}{% endblock %}'
        )

        with pytest.raises(TemplateParseError):
            Jinja2TemplateEngine().render([layout, page], {}, io.StringIO())

    def test_undefined_variable_raises_execution_error(self, tmp_path, layout):
        """정의되지 않은 변수는 실행 에러 (strict 모드)"""
        page = _write(tmp_path, "page.html", "{% block content %}{{ missing.field }}{% endblock %}")
        buffer = io.StringIO()

        with pytest.raises(TemplateExecutionError) as exc_info:
            Jinja2TemplateEngine().render([layout, page], {}, buffer)

        assert exc_info.value.error_code == ErrorCode.TEMPLATE_EXECUTION_FAILED
        assert exc_info.value.template_path == str(page)
        assert buffer.getvalue() == ""

    def test_undefined_variable_tolerated_when_not_strict(self, tmp_path, layout):
        """strict_undefined=False면 정의되지 않은 변수는 빈 문자열"""
        page = _write(tmp_path, "page.html", "{% block content %}[{{ missing }}]{% endblock %}")
        buffer = io.StringIO()

        Jinja2TemplateEngine(strict_undefined=False).render([layout, page], {}, buffer)

        assert "<body>[]</body>" in buffer.getvalue()

    def test_runtime_error_raises_execution_error(self, tmp_path, layout):
        """렌더링 중 예외는 실행 에러"""
        page = _write(tmp_path, "page.html", "{% block content %}{{ 1 / zero }}{% endblock %}")

        with pytest.raises(TemplateExecutionError):
            Jinja2TemplateEngine().render([layout, page], {"zero": 0}, io.StringIO())

    def test_unsupported_data_raises_execution_error(self, tmp_path, layout):
        """컨텍스트로 쓸 수 없는 데이터는 실행 에러"""
        page = _write(tmp_path, "page.html", "{% block content %}x{% endblock %}")

        with pytest.raises(TemplateExecutionError):
            Jinja2TemplateEngine().render([layout, page], 42, io.StringIO())

    def test_writer_failure_raises_execution_error(self, tmp_path, layout):
        """writer 쓰기 실패는 실행 에러"""
        page = _write(tmp_path, "page.html", "{% block content %}x{% endblock %}")
        buffer = io.StringIO()
        buffer.close()

        with pytest.raises(TemplateExecutionError):
            Jinja2TemplateEngine().render([layout, page], {}, buffer)

    def test_empty_sources_raises_parse_error(self):
        """소스가 없으면 파싱 에러"""
        with pytest.raises(TemplateParseError):
            Jinja2TemplateEngine().render([], {}, io.StringIO())
