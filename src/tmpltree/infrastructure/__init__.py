"""
Infrastructure Layer

외부 의존성 구현 (Jinja2 렌더링 엔진, structlog 로깅, 설정 로더)
"""
