# services/petition_markup/alignment.py
"""
Camada de compatibilidade entre o wrapper de alinhamento embutido no texto
(`<div style="text-align: ...">...</div>`) e linhas etiquetadas.

O conteúdo persistido continua sendo uma string simples; internamente o
renderizador trabalha com `TaggedLine(text, align)` e nunca exibe o HTML.
"""

from typing import Iterable, List, Optional

from .models import Alignment, TaggedLine
from .patterns import ALIGN_OPEN, ALIGN_CLOSE, ALIGN_WRAPPER, TEXT_ALIGN_VALUE


def parse_align_style(style: str) -> Optional[Alignment]:
    """
    Extrai o alinhamento do atributo style.

    Reconhece left, center e right; sem `text-align` (ou com outro valor)
    retorna None e a linha fica sem alinhamento explícito.
    """
    match = TEXT_ALIGN_VALUE.search(style or "")
    if not match:
        return None
    return Alignment(match.group(1).lower())


def unwrap_line(line: str) -> TaggedLine:
    """
    Converte uma linha possivelmente envolvida em <div> numa TaggedLine.

    Apenas o primeiro wrapper da linha é considerado; texto fora dele é
    preservado.
    """
    match = ALIGN_WRAPPER.search(line)
    if not match:
        return TaggedLine(text=line)

    align = parse_align_style(match.group(1))
    text = line[:match.start()] + match.group(2) + line[match.end():]
    return TaggedLine(text=text, align=align)


def wrap_line(text: str, align: Optional[Alignment]) -> str:
    """Serializa uma linha com alinhamento explícito no formato do editor."""
    if align is None:
        return text
    return ALIGN_OPEN.format(align=Alignment(align).value) + text + ALIGN_CLOSE


def has_alignment_wrapper(line: str) -> bool:
    """Verifica se a linha contém um wrapper de alinhamento."""
    return ALIGN_WRAPPER.search(line) is not None


def parse_tagged_lines(content: str) -> List[TaggedLine]:
    """Divide o conteúdo em linhas etiquetadas."""
    if not content:
        return []
    return [unwrap_line(line) for line in content.split('\n')]


def serialize_tagged_lines(lines: Iterable[TaggedLine]) -> str:
    """Reconstrói o conteúdo a partir de linhas etiquetadas."""
    return '\n'.join(wrap_line(line.text, line.align) for line in lines)
