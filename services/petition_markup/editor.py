# services/petition_markup/editor.py
"""
Editor de pseudo-marcação para petições.

Todas as operações são transformações puras de string: recebem o conteúdo
atual e a seleção, devolvem o novo conteúdo e a posição do cursor. Não há
modelo estruturado de documento; a string é a única fonte de verdade.
"""

from typing import Callable, Tuple, Union

from utils.logging_config import get_logger

from .alignment import unwrap_line, wrap_line
from .models import Alignment, EditResult, FormattingOperation, TemplateKind
from .patterns import ALIGN_OPEN, ALIGN_CLOSE, LINE_PREFIXES, ORDERED_PREFIX, WRAP_MARKERS
from .templates import get_template
from .utils import clamp_selection


logger = get_logger(__name__)


class PetitionEditor:
    """
    Aplica formatação e insere templates num buffer de texto simples.

    Exemplo de uso:
        from services.petition_markup import petition_editor

        content, cursor = petition_editor.apply_formatting("", 0, 0, "bold")
        # content == "****", cursor == 2
    """

    def apply_formatting(
        self,
        content: str,
        selection_start: int,
        selection_end: int,
        operation: Union[FormattingOperation, str],
    ) -> EditResult:
        """
        Aplica uma operação da barra de ferramentas sobre a seleção.

        Com seleção vazia insere o par de marcadores (cursor entre eles) ou o
        prefixo de linha (cursor logo após). Com seleção, envolve o trecho ou
        aplica o marcador no início de cada linha selecionada.

        Args:
            content: Conteúdo atual
            selection_start: Início da seleção
            selection_end: Fim da seleção (exclusivo)
            operation: Operação de formatação

        Returns:
            EditResult com o novo conteúdo e a nova posição do cursor
        """
        content = content or ""
        start, end = clamp_selection(content, selection_start, selection_end)

        op = self._resolve(FormattingOperation, operation)
        if op is None:
            logger.warning("Operação de formatação desconhecida", operation=str(operation))
            return EditResult(content, end)

        selected = content[start:end]

        if op in WRAP_MARKERS:
            opening, closing = WRAP_MARKERS[op]
            replacement, offset = self._wrap(selected, opening, closing)
        elif op in (FormattingOperation.CENTER, FormattingOperation.RIGHT):
            replacement, offset = self._align(selected, Alignment(op.value))
        elif op == FormattingOperation.LEFT:
            replacement, offset = self._remove_alignment(selected)
        elif op == FormattingOperation.ORDERED_LIST:
            replacement, offset = self._prefix_lines(
                selected, lambda i: ORDERED_PREFIX.format(number=i + 1)
            )
        else:
            prefix = LINE_PREFIXES[op]
            replacement, offset = self._prefix_lines(selected, lambda i: prefix)

        new_content = content[:start] + replacement + content[end:]
        return EditResult(new_content, start + offset)

    def insert_template(
        self,
        content: str,
        cursor_position: int,
        template_kind: Union[TemplateKind, str],
    ) -> EditResult:
        """
        Insere uma seção padronizada na posição do cursor.

        O texto é inserido literalmente, sem validar o conteúdo ao redor;
        o cursor vai para o fim do trecho inserido.
        """
        content = content or ""
        position, _ = clamp_selection(content, cursor_position, cursor_position)

        kind = self._resolve(TemplateKind, template_kind)
        if kind is None:
            logger.warning("Template desconhecido", template=str(template_kind))
            return EditResult(content, position)

        template = get_template(kind)
        new_content = content[:position] + template + content[position:]
        return EditResult(new_content, position + len(template))

    @staticmethod
    def _resolve(enum_cls, value):
        """Converte valor para o enum; None se não reconhecido."""
        try:
            return enum_cls(value)
        except ValueError:
            return None

    @staticmethod
    def _wrap(selected: str, opening: str, closing: str) -> Tuple[str, int]:
        if selected:
            text = f"{opening}{selected}{closing}"
            return text, len(text)
        return opening + closing, len(opening)

    @staticmethod
    def _prefix_lines(selected: str, prefix_for: Callable[[int], str]) -> Tuple[str, int]:
        if not selected:
            prefix = prefix_for(0)
            return prefix, len(prefix)
        lines = selected.split('\n')
        text = '\n'.join(prefix_for(i) + line for i, line in enumerate(lines))
        return text, len(text)

    @staticmethod
    def _align(selected: str, align: Alignment) -> Tuple[str, int]:
        if not selected:
            opening = ALIGN_OPEN.format(align=align.value)
            return opening + ALIGN_CLOSE, len(opening)
        # Linhas já alinhadas trocam de wrapper em vez de aninhar
        lines = selected.split('\n')
        text = '\n'.join(wrap_line(unwrap_line(line).text, align) for line in lines)
        return text, len(text)

    @staticmethod
    def _remove_alignment(selected: str) -> Tuple[str, int]:
        text = '\n'.join(unwrap_line(line).text for line in selected.split('\n'))
        return text, len(text)


# Singleton para uso direto
petition_editor = PetitionEditor()


def apply_formatting(
    content: str,
    selection_start: int,
    selection_end: int,
    operation: Union[FormattingOperation, str],
) -> EditResult:
    """Atalho para `petition_editor.apply_formatting`."""
    return petition_editor.apply_formatting(content, selection_start, selection_end, operation)


def insert_template(
    content: str,
    cursor_position: int,
    template_kind: Union[TemplateKind, str],
) -> EditResult:
    """Atalho para `petition_editor.insert_template`."""
    return petition_editor.insert_template(content, cursor_position, template_kind)
