# services/petition_renderer/exceptions.py
"""
Exceções do serviço de petições.

Editor e renderizador são totais e não lançam exceções; estas classes
cobrem apenas as exportações (DOCX/JSON/HTML).
"""


class PetitionError(Exception):
    """Exceção base do serviço de petições."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or "PETITION_ERROR"
        self.details = details or {}

    def to_dict(self) -> dict:
        """Converte para dicionário (corpo de erro da API)."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DocumentExportError(PetitionError):
    """Falha ao gerar um arquivo exportado."""

    def __init__(self, message: str, export_format: str = None, details: dict = None):
        details = dict(details or {})
        if export_format:
            details["format"] = export_format
        super().__init__(message, "EXPORT_ERROR", details)
