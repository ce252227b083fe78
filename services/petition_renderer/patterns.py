# services/petition_renderer/patterns.py
"""
Regex e palavras-chave da classificação de linhas.

Os valores estão ajustados às convenções das petições iniciais em
português e são consumidos pelas regras em ordem (ver rules.py).
"""

import re


# =============================================================================
# Limpeza prévia do conteúdo
# =============================================================================

# Cercas de bloco de código deixadas por geração automática
MARKDOWN_FENCE_LANG = re.compile(r'```markdown\n?')
MARKDOWN_FENCE = re.compile(r'```\n?')

# Marcadores de título (# a ######) e espaços seguintes na mesma linha
HEADER_MARKERS = re.compile(r'#{1,6}[ \t]*')

# Marcador de negrito removido do texto exibido
BOLD_MARKER = '**'


# =============================================================================
# Regra 1: Cabeçalho principal (endereçamento)
# =============================================================================

MAIN_CAPTION_KEYWORDS = ('EXCELENTÍSSIMO', 'JUIZ DE DIREITO')
CAPTION_VENUE_KEYWORDS = ('VARA', 'COMARCA')
CAPTION_MIN_LENGTH = 30


# =============================================================================
# Regra 2: Título da ação
# =============================================================================

TITLE_MAX_INDEX = 5
TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 100
TITLE_EXCLUDED_KEYWORDS = ('EXCELENTÍSSIMO', 'QUALIFICAÇÃO')


# =============================================================================
# Regra 3: Títulos de seção
# =============================================================================

SECTION_KEYWORDS = (
    'QUALIFICAÇÃO',
    'DOS FATOS',
    'DO DIREITO',
    'DOS PEDIDOS',
    'VALOR DA CAUSA',
)
SECTION_PREFIXES = ('DOS ', 'DA ', 'DO ')


# =============================================================================
# Regra 4: Qualificação das partes
# =============================================================================

PARTY_KEYWORDS = ('REQUERENTE:', 'REQUERIDO:')


# =============================================================================
# Regras 5 e 6: Parágrafos numerados e alíneas
# =============================================================================

NUMBERED_PARAGRAPH_START = re.compile(r'^\d+\.\s')
NUMBERED_PARAGRAPH = re.compile(r'^(\d+\.)\s(.+)')

LETTERED_ITEM_START = re.compile(r'^[a-z]\)\s')
LETTERED_ITEM = re.compile(r'^([a-z]\))\s(.+)')


# =============================================================================
# Regra 7: Fecho
# =============================================================================

CLOSING_PHRASES = ('nestes termos', 'pede deferimento')


# =============================================================================
# Regra 8: Local e data
# =============================================================================

# "Campo Grande, 10 de março de 2024"
PLACE_DATE = re.compile(r'\w+,\s*\d+\s*de\s*\w+\s*de\s*\d{4}')

# "Campo Grande/MS, ..."
CITY_STATE = re.compile(r'\w+/\w+,')


# =============================================================================
# Regra 9: Assinatura
# =============================================================================

SIGNATURE_KEYWORD = 'OAB'
BRACKETED_LINE = re.compile(r'^\[.*\]$')
SIGNATURE_MAX_LENGTH = 50
SIGNATURE_TAIL_LINES = 5


# =============================================================================
# Regra 11: Parágrafo padrão
# =============================================================================

INDENT_MIN_LENGTH = 100
INDENT_BLOCKERS = (':', 'Art.', '§', 'OAB')


# =============================================================================
# Placeholder para documento vazio
# =============================================================================

EMPTY_DOCUMENT_TEXT = "Nenhum conteúdo disponível"
EMPTY_DOCUMENT_HINT = 'Use a aba "Editar" para adicionar conteúdo'
