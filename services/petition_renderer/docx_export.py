# services/petition_renderer/docx_export.py
"""
Exportação da petição para DOCX.

Cada bloco classificado vira um parágrafo do Word com alinhamento, negrito,
itálico e recuo correspondentes ao seu tipo. Ênfase inline (**negrito**,
*itálico*, __sublinhado__) é reaplicada a partir da linha original.

REGRAS DE FORMATAÇÃO:
- Fonte padrão: Times New Roman 12pt, espaçamento 1,5
- Margens: 2,54 cm (1 polegada) em todos os lados
- Cabeçalho/título da ação/seções: centralizados, negrito
- Itens numerados e alíneas: recuo à esquerda, justificados
- Parágrafos longos de narrativa: recuo de primeira linha
- Assinatura: centralizada, com linha acima
"""

import io
import re
from typing import List, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt, Cm

from services.petition_markup.models import Alignment
from utils.logging_config import get_logger

from .exceptions import DocumentExportError
from .models import Block, BlockKind, RenderOptions, TextSize
from .renderer import petition_renderer


logger = get_logger(__name__)

ALIGNMENT_MAP = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
    Alignment.JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
}

# Incremento em pontos sobre a fonte base
SIZE_DELTA = {
    TextSize.SMALL: -1,
    TextSize.NORMAL: 0,
    TextSize.LARGE: 2,
    TextSize.XLARGE: 4,
}

# Ênfase inline: ***negrito+itálico***, **negrito**, __sublinhado__, *itálico*
INLINE_MARKUP = re.compile(r'(\*\*\*.+?\*\*\*|\*\*.+?\*\*|__.+?__|\*[^*]+?\*)')

SIGNATURE_LINE = "_" * 40

# Caracteres de controle que o XML do Word não aceita (ex.: \x0b colado do Word)
XML_ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


class DocxExporter:
    """
    Conversor de conteúdo de petição para DOCX.

    Configurações padrão:
    - Fonte: Times New Roman 12pt (ou RenderOptions)
    - Recuo primeira linha: 1,27 cm
    - Recuo de itens: 1,27 cm (alíneas 1,9 cm)
    - Espaçamento entre linhas: 1.5
    """

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        first_line_indent_cm: float = 1.27,
        item_indent_cm: float = 1.27,
        lettered_indent_cm: float = 1.9,
        line_spacing: float = 1.5,
        space_after_pt: int = 6,
        margin_cm: float = 2.54,
    ):
        self.options = options or RenderOptions()
        self.font_name = self.options.font_family
        self.font_size = self.options.font_size

        self.first_line_indent = Cm(first_line_indent_cm)
        self.item_indent = Cm(item_indent_cm)
        self.lettered_indent = Cm(lettered_indent_cm)
        self.line_spacing = line_spacing
        self.space_after = Pt(space_after_pt)
        self.margin = Cm(margin_cm)

    def export(self, content: Optional[str], title: Optional[str] = None) -> bytes:
        """
        Gera o arquivo DOCX do conteúdo.

        Args:
            content: Conteúdo da petição
            title: Título gravado nas propriedades do documento

        Returns:
            Bytes do arquivo .docx

        Raises:
            DocumentExportError: se a geração do documento falhar
        """
        blocks = petition_renderer.render(content)
        try:
            doc = Document()
            self._configure_document(doc, title)
            self._add_blocks(doc, blocks)

            buffer = io.BytesIO()
            doc.save(buffer)
        except Exception as e:
            logger.error("Erro na geração do DOCX", error=str(e))
            raise DocumentExportError(
                "Erro ao gerar DOCX. Tente novamente.",
                export_format="docx",
                details={"reason": str(e)},
            ) from e

        logger.info("DOCX gerado", blocks=len(blocks), size_bytes=buffer.tell())
        return buffer.getvalue()

    def _configure_document(self, doc: Document, title: Optional[str]):
        """Configura margens, estilo Normal e propriedades."""
        for section in doc.sections:
            section.top_margin = self.margin
            section.bottom_margin = self.margin
            section.left_margin = self.margin
            section.right_margin = self.margin

        style = doc.styles['Normal']
        style.font.name = self.font_name
        style.font.size = Pt(self.font_size)
        style.paragraph_format.line_spacing = self.line_spacing
        style.paragraph_format.space_after = self.space_after
        # Fonte para caracteres asiáticos (evita fallback)
        style._element.rPr.rFonts.set(qn('w:eastAsia'), self.font_name)

        if title:
            doc.core_properties.title = XML_ILLEGAL_CHARS.sub('', title)

    def _add_blocks(self, doc: Document, blocks: List[Block]):
        for block in blocks:
            # Espaçadores e placeholder não geram parágrafo
            if block.kind in (BlockKind.SPACER, BlockKind.PLACEHOLDER):
                continue
            if block.rule_above:
                self._add_rule_line(doc, block)
            if block.kind == BlockKind.PARTY_QUALIFICATION:
                self._add_party(doc, block)
            elif block.kind in (BlockKind.NUMBERED_PARAGRAPH, BlockKind.LETTERED_ITEM):
                self._add_item(doc, block)
            else:
                self._add_paragraph(doc, block)

    def _new_paragraph(self, doc: Document, block: Block):
        p = doc.add_paragraph()
        p.alignment = ALIGNMENT_MAP[block.align]
        p.paragraph_format.first_line_indent = self.first_line_indent if block.indent else Cm(0)
        if block.border_below:
            p.paragraph_format.space_before = Pt(18)
            p.paragraph_format.space_after = Pt(12)
        return p

    def _add_paragraph(self, doc: Document, block: Block):
        """Títulos usam o texto já limpo; demais blocos reaplicam ênfase inline."""
        p = self._new_paragraph(doc, block)
        if block.kind in (BlockKind.MAIN_CAPTION, BlockKind.ACTION_TITLE, BlockKind.SECTION_HEADING):
            text = block.text.upper() if block.uppercase else block.text
            self._add_run(p, text, block, bold=True)
        else:
            self._add_formatted_text(p, block.source, block)

    def _add_party(self, doc: Document, block: Block):
        p = self._new_paragraph(doc, block)
        self._add_run(p, f"{block.label}:", block, bold=True)
        if block.value:
            self._add_run(p, f" {block.value}", block)

    def _add_item(self, doc: Document, block: Block):
        p = self._new_paragraph(doc, block)
        if block.kind == BlockKind.LETTERED_ITEM:
            p.paragraph_format.left_indent = self.lettered_indent
        else:
            p.paragraph_format.left_indent = self.item_indent
        self._add_run(p, f"{block.token} ", block, bold=True)
        # Corpo com ênfase inline a partir da linha original
        self._add_formatted_text(p, block.source[len(block.token):].strip(), block)

    def _add_rule_line(self, doc: Document, block: Block):
        """Linha de assinatura acima do bloco."""
        line = doc.add_paragraph()
        line.alignment = ALIGNMENT_MAP[block.align]
        line.paragraph_format.space_before = Pt(24)
        line.paragraph_format.space_after = Pt(0)
        self._add_run(line, SIGNATURE_LINE, block)

    def _add_formatted_text(self, paragraph, text: str, block: Block):
        """Adiciona texto com ênfase inline (negrito, itálico, sublinhado)."""
        last_end = 0
        for match in INLINE_MARKUP.finditer(text):
            if match.start() > last_end:
                self._add_run(paragraph, text[last_end:match.start()], block)

            marked = match.group(0)
            if marked.startswith('***'):
                self._add_run(paragraph, marked[3:-3], block, bold=True, italic=True)
            elif marked.startswith('**'):
                self._add_run(paragraph, marked[2:-2], block, bold=True)
            elif marked.startswith('__'):
                self._add_run(paragraph, marked[2:-2], block, underline=True)
            else:
                self._add_run(paragraph, marked[1:-1], block, italic=True)

            last_end = match.end()

        if last_end < len(text):
            self._add_run(paragraph, text[last_end:], block)

    def _add_run(
        self,
        paragraph,
        text: str,
        block: Block,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
    ):
        run = paragraph.add_run(XML_ILLEGAL_CHARS.sub('', text))
        run.font.name = self.font_name
        run.font.size = Pt(self.font_size + SIZE_DELTA[block.size])
        run.bold = bold or block.bold
        run.italic = italic or block.italic
        if underline:
            run.underline = True
        return run


def export_docx(
    content: Optional[str],
    title: Optional[str] = None,
    options: Optional[RenderOptions] = None,
) -> bytes:
    """Atalho para `DocxExporter(options).export(content, title)`."""
    return DocxExporter(options).export(content, title)
