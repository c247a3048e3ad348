"""
Application Layer

Use Cases (TemplateManager) 및 Ports (인터페이스)
"""
