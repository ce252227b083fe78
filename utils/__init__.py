# utils/__init__.py
"""
Utilitários compartilhados (logging, timezone).
"""
