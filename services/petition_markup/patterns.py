# services/petition_markup/patterns.py
"""
Marcadores e regex pré-compilados da pseudo-marcação.

Editor e renderizador precisam concordar com este vocabulário: alterar um
marcador aqui sem ajustar o outro lado quebra a ida e volta do conteúdo.
"""

import re

from .models import FormattingOperation


# =============================================================================
# Marcadores de ênfase (envolvem a seleção)
# =============================================================================

WRAP_MARKERS = {
    FormattingOperation.BOLD: ("**", "**"),
    FormattingOperation.ITALIC: ("*", "*"),
    FormattingOperation.UNDERLINE: ("__", "__"),
}


# =============================================================================
# Prefixos de linha
# =============================================================================

LINE_PREFIXES = {
    FormattingOperation.H1: "# ",
    FormattingOperation.H2: "## ",
    FormattingOperation.H3: "### ",
    FormattingOperation.UNORDERED_LIST: "- ",
    FormattingOperation.QUOTE: "> ",
}

# Lista numerada: "1. ", "2. ", ...
ORDERED_PREFIX = "{number}. "


# =============================================================================
# Alinhamento (wrapper HTML embutido no texto)
# =============================================================================

ALIGN_OPEN = '<div style="text-align: {align}">'
ALIGN_CLOSE = "</div>"

# Wrapper completo: captura o estilo e o conteúdo interno
ALIGN_WRAPPER = re.compile(r'<div style="([^"]*)">(.*?)</div>')

# Valor de text-align dentro do atributo style
TEXT_ALIGN_VALUE = re.compile(r'text-align\s*:\s*(left|center|right)', re.IGNORECASE)


# =============================================================================
# Limpeza de marcação (exportação em texto puro)
# =============================================================================

HEADER_MARKER = re.compile(r'#{1,6}\s')
BOLD_MARKER = re.compile(r'\*\*(.*?)\*\*')
ITALIC_MARKER = re.compile(r'\*(.*?)\*')
UNDERLINE_MARKER = re.compile(r'__([^_]+)__')
HTML_TAG = re.compile(r'<[^>]*>')

HTML_ENTITIES = {
    '&nbsp;': ' ',
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
}
