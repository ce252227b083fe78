# services/petition_renderer/rules.py
"""
Cascata de classificação de linhas.

Cada linha é avaliada contra CLASSIFICATION_RULES na ordem declarada e a
primeira regra que casa define o bloco. A ordem faz parte do contrato:
reordenar as regras muda a saída.

Uma regra pode casar e ainda assim não produzir bloco (o construtor devolve
None); nesse caso a avaliação segue para a próxima regra.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from services.petition_markup.models import Alignment

from .models import Block, BlockKind, TextSize
from .patterns import (
    BOLD_MARKER,
    MAIN_CAPTION_KEYWORDS,
    CAPTION_VENUE_KEYWORDS,
    CAPTION_MIN_LENGTH,
    TITLE_MAX_INDEX,
    TITLE_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_EXCLUDED_KEYWORDS,
    SECTION_KEYWORDS,
    SECTION_PREFIXES,
    PARTY_KEYWORDS,
    NUMBERED_PARAGRAPH_START,
    NUMBERED_PARAGRAPH,
    LETTERED_ITEM_START,
    LETTERED_ITEM,
    CLOSING_PHRASES,
    PLACE_DATE,
    CITY_STATE,
    SIGNATURE_KEYWORD,
    BRACKETED_LINE,
    SIGNATURE_MAX_LENGTH,
    SIGNATURE_TAIL_LINES,
    INDENT_MIN_LENGTH,
    INDENT_BLOCKERS,
)


@dataclass(frozen=True)
class LineContext:
    """
    Linha em classificação, já aparada e sem wrapper de alinhamento.

    Sem `index`/`total_lines` (linha avulsa) as heurísticas posicionais das
    regras de título da ação e de assinatura não se aplicam. `wrapped` indica
    wrapper <div> do editor, com ou sem `text-align` (`align`).
    """

    text: str
    index: Optional[int] = None
    total_lines: Optional[int] = None
    align: Optional[Alignment] = None
    wrapped: bool = False

    @property
    def is_upper(self) -> bool:
        """Linha inalterada por upper() (linhas sem letras também contam)."""
        return self.text == self.text.upper()

    @property
    def display(self) -> str:
        return strip_bold(self.text)


@dataclass(frozen=True)
class ClassificationRule:
    """Par (predicado, construtor) de uma posição da cascata."""

    name: str
    kind: BlockKind
    matches: Callable[[LineContext], bool]
    build: Callable[[LineContext], Optional[Block]]


def strip_bold(text: str) -> str:
    """Remove os marcadores `**` do texto exibido."""
    return text.replace(BOLD_MARKER, '')


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


# =============================================================================
# Predicados
# =============================================================================

def is_blank(ctx: LineContext) -> bool:
    return ctx.text == ''


def is_main_caption(ctx: LineContext) -> bool:
    if _contains_any(ctx.text, MAIN_CAPTION_KEYWORDS):
        return True
    return (
        ctx.is_upper
        and len(ctx.text) > CAPTION_MIN_LENGTH
        and _contains_any(ctx.text, CAPTION_VENUE_KEYWORDS)
    )


def is_action_title(ctx: LineContext) -> bool:
    return (
        ctx.index is not None
        and ctx.index < TITLE_MAX_INDEX
        and TITLE_MIN_LENGTH < len(ctx.text) < TITLE_MAX_LENGTH
        and not _contains_any(ctx.text, TITLE_EXCLUDED_KEYWORDS)
    )


def is_section_heading(ctx: LineContext) -> bool:
    if not ctx.is_upper:
        return False
    return (
        _contains_any(ctx.text, SECTION_KEYWORDS)
        or ctx.text.startswith(SECTION_PREFIXES)
    )


def is_party_qualification(ctx: LineContext) -> bool:
    return _contains_any(ctx.text, PARTY_KEYWORDS)


def is_numbered_paragraph(ctx: LineContext) -> bool:
    return NUMBERED_PARAGRAPH_START.match(ctx.text) is not None


def is_lettered_item(ctx: LineContext) -> bool:
    return LETTERED_ITEM_START.match(ctx.text) is not None


def is_closing_phrase(ctx: LineContext) -> bool:
    return _contains_any(ctx.text.lower(), CLOSING_PHRASES)


def is_place_date(ctx: LineContext) -> bool:
    return PLACE_DATE.search(ctx.text) is not None or CITY_STATE.search(ctx.text) is not None


def is_signature(ctx: LineContext) -> bool:
    if SIGNATURE_KEYWORD in ctx.text or BRACKETED_LINE.match(ctx.text):
        return True
    # Heurística posicional: linha curta entre as últimas do documento
    return (
        ctx.index is not None
        and ctx.total_lines is not None
        and len(ctx.text) < SIGNATURE_MAX_LENGTH
        and ctx.index > ctx.total_lines - SIGNATURE_TAIL_LINES
    )


def has_explicit_alignment(ctx: LineContext) -> bool:
    return ctx.wrapped or ctx.align is not None


def always(ctx: LineContext) -> bool:
    return True


def should_indent(text: str) -> bool:
    """Recuo de primeira linha apenas para parágrafos longos de narrativa."""
    return len(text) > INDENT_MIN_LENGTH and not _contains_any(text, INDENT_BLOCKERS)


# =============================================================================
# Construtores de bloco
# =============================================================================

def _block(ctx: LineContext, kind: BlockKind, **attrs) -> Block:
    attrs.setdefault("text", ctx.display)
    return Block(kind=kind, index=ctx.index, source=ctx.text, **attrs)


def build_spacer(ctx: LineContext) -> Block:
    return _block(ctx, BlockKind.SPACER, text="")


def build_main_caption(ctx: LineContext) -> Block:
    return _block(
        ctx, BlockKind.MAIN_CAPTION,
        align=Alignment.CENTER, bold=True, uppercase=True, size=TextSize.LARGE,
    )


def build_action_title(ctx: LineContext) -> Block:
    return _block(
        ctx, BlockKind.ACTION_TITLE,
        align=Alignment.CENTER, bold=True, size=TextSize.XLARGE,
    )


def build_section_heading(ctx: LineContext) -> Block:
    return _block(
        ctx, BlockKind.SECTION_HEADING,
        align=Alignment.CENTER, bold=True, uppercase=True,
        size=TextSize.LARGE, border_below=True,
    )


def build_party_qualification(ctx: LineContext) -> Optional[Block]:
    parts = ctx.text.split(':')
    if len(parts) < 2:
        return None
    label = strip_bold(parts[0]).strip()
    value = strip_bold(':'.join(parts[1:])).strip()
    return _block(
        ctx, BlockKind.PARTY_QUALIFICATION,
        text=f"{label}: {value}", label=label, value=value,
        align=Alignment.LEFT,
    )


def build_numbered_paragraph(ctx: LineContext) -> Optional[Block]:
    match = NUMBERED_PARAGRAPH.match(ctx.text)
    if not match:
        return None
    token, body = match.group(1), strip_bold(match.group(2))
    return _block(
        ctx, BlockKind.NUMBERED_PARAGRAPH,
        text=f"{token} {body}", token=token, body=body,
    )


def build_lettered_item(ctx: LineContext) -> Optional[Block]:
    match = LETTERED_ITEM.match(ctx.text)
    if not match:
        return None
    token, body = match.group(1), strip_bold(match.group(2))
    return _block(
        ctx, BlockKind.LETTERED_ITEM,
        text=f"{token} {body}", token=token, body=body,
    )


def build_closing_phrase(ctx: LineContext) -> Block:
    return _block(ctx, BlockKind.CLOSING_PHRASE, align=Alignment.CENTER, italic=True)


def build_place_date(ctx: LineContext) -> Block:
    return _block(ctx, BlockKind.PLACE_DATE, align=Alignment.RIGHT)


def build_signature(ctx: LineContext) -> Block:
    return _block(
        ctx, BlockKind.SIGNATURE,
        align=Alignment.CENTER, rule_above=True, size=TextSize.SMALL,
    )


def build_aligned_text(ctx: LineContext) -> Block:
    return _block(ctx, BlockKind.ALIGNED_TEXT, align=ctx.align or Alignment.LEFT)


def build_paragraph(ctx: LineContext) -> Block:
    return _block(ctx, BlockKind.PARAGRAPH, indent=should_indent(ctx.text))


# =============================================================================
# Cascata (ordem = precedência)
# =============================================================================

CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule("blank", BlockKind.SPACER, is_blank, build_spacer),
    ClassificationRule("main_caption", BlockKind.MAIN_CAPTION, is_main_caption, build_main_caption),
    ClassificationRule("action_title", BlockKind.ACTION_TITLE, is_action_title, build_action_title),
    ClassificationRule("section_heading", BlockKind.SECTION_HEADING, is_section_heading, build_section_heading),
    ClassificationRule("party_qualification", BlockKind.PARTY_QUALIFICATION, is_party_qualification, build_party_qualification),
    ClassificationRule("numbered_paragraph", BlockKind.NUMBERED_PARAGRAPH, is_numbered_paragraph, build_numbered_paragraph),
    ClassificationRule("lettered_item", BlockKind.LETTERED_ITEM, is_lettered_item, build_lettered_item),
    ClassificationRule("closing_phrase", BlockKind.CLOSING_PHRASE, is_closing_phrase, build_closing_phrase),
    ClassificationRule("place_date", BlockKind.PLACE_DATE, is_place_date, build_place_date),
    ClassificationRule("signature", BlockKind.SIGNATURE, is_signature, build_signature),
    ClassificationRule("aligned_text", BlockKind.ALIGNED_TEXT, has_explicit_alignment, build_aligned_text),
    ClassificationRule("paragraph", BlockKind.PARAGRAPH, always, build_paragraph),
)
