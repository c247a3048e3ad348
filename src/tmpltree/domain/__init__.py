"""
Domain Layer

템플릿 트리 모델, 트리 구성 서비스, 에러 정의
"""
