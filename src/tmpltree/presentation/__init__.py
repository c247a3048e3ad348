"""
Presentation Layer

CLI (click + rich)
"""
