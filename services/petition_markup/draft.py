# services/petition_markup/draft.py
"""
Rascunho de petição em edição.

Mantém o par (conteúdo, cursor) da tela que hospeda o editor e repassa o
conteúdo, sem alterações, para a operação de salvamento fornecida pelo
chamador (persistência fica fora deste módulo).
"""

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from utils.logging_config import get_logger

from .editor import petition_editor
from .models import DocumentMetrics, EditResult, FormattingOperation, TemplateKind
from .utils import document_metrics


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class PetitionDraft:
    """
    Conteúdo de uma petição sendo editada.

    Cada operação é calculada a partir do snapshot atual de conteúdo e
    seleção; a última escrita prevalece.
    """

    content: str = ""
    cursor: int = 0

    def format(
        self,
        operation: Union[FormattingOperation, str],
        selection_start: Optional[int] = None,
        selection_end: Optional[int] = None,
    ) -> EditResult:
        """Aplica formatação na seleção (padrão: seleção vazia no cursor)."""
        start = self.cursor if selection_start is None else selection_start
        end = start if selection_end is None else selection_end
        return self._apply(
            petition_editor.apply_formatting(self.content, start, end, operation)
        )

    def insert_template(self, template_kind: Union[TemplateKind, str]) -> EditResult:
        """Insere um template na posição atual do cursor."""
        return self._apply(
            petition_editor.insert_template(self.content, self.cursor, template_kind)
        )

    def type_text(self, text: str) -> EditResult:
        """Insere texto digitado na posição do cursor."""
        position = min(max(self.cursor, 0), len(self.content))
        content = self.content[:position] + text + self.content[position:]
        return self._apply(EditResult(content, position + len(text)))

    @property
    def metrics(self) -> DocumentMetrics:
        """Métricas do conteúdo atual."""
        return document_metrics(self.content)

    def save(self, saver: Callable[[str], T]) -> T:
        """
        Entrega o conteúdo atual ao colaborador de persistência.

        Args:
            saver: Função que persiste a string (ex.: update do registro)

        Returns:
            O retorno do próprio saver
        """
        logger.info("Salvando rascunho de petição", characters=len(self.content))
        return saver(self.content)

    def _apply(self, result: EditResult) -> EditResult:
        self.content, self.cursor = result
        return result
