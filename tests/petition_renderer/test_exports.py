# tests/petition_renderer/test_exports.py
"""
Testes das exportações HTML, DOCX, JSON e texto puro.

Execução:
    pytest tests/petition_renderer/test_exports.py -v
"""

import io
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from services.petition_renderer import (
    Block,
    BlockKind,
    DocumentExportError,
    DocxExporter,
    PetitionExportRequest,
    RenderOptions,
    export_docx,
    export_filename,
    export_json,
    export_text,
    render_html,
)
from services.petition_renderer.html_export import render_blocks_html


def _open_docx(data: bytes):
    return Document(io.BytesIO(data))


class TestHtmlExport:
    """Pré-visualização HTML."""

    def test_root_container(self, sample_petition):
        html = render_html(sample_petition)
        assert html.startswith('<div class="legal-document"')
        assert html.rstrip().endswith("</div>")

    def test_heading_tags(self, sample_petition):
        html = render_html(sample_petition)
        assert "<h1 " in html
        assert "<h2 " in html
        assert "<h3 " in html
        assert "border-bottom: 2px solid #d1d5db" in html

    def test_party_label_and_value(self, sample_petition):
        html = render_html(sample_petition)
        assert "REQUERENTE:</span>" in html
        assert "Maria da Silva, brasileira, casada" in html

    def test_alignment_wrapper_not_shown(self):
        html = render_html('<div style="text-align: center">Brasília, 2024</div>')
        assert "text-align: center" in html
        assert "Brasília, 2024" in html
        assert '<div style="text-align: center">Brasília' not in html

    def test_text_is_escaped(self):
        html = render_html("Texto com <script>alert(1)</script> no meio do parágrafo")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_placeholder(self):
        html = render_html("")
        assert "Nenhum conteúdo disponível" in html

    def test_options_applied(self):
        options = RenderOptions(font_family="Arial", font_size=14)
        html = render_html("Texto", options)
        assert "font-family: Arial" in html
        assert "font-size: 14pt" in html

    def test_invalid_font_size_rejected(self):
        with pytest.raises(ValueError):
            RenderOptions(font_size=100)

    def test_signature_rule_line(self, sample_petition):
        html = render_html(sample_petition)
        assert html.count("border-bottom: 1px solid #4b5563") == 2

    def test_rule_line_follows_block_flag(self):
        """Linha de assinatura depende de rule_above, não do tipo do bloco."""
        with_rule = Block(kind=BlockKind.PARAGRAPH, text="Texto", rule_above=True)
        without_rule = Block(kind=BlockKind.SIGNATURE, text="Texto")
        assert "border-bottom: 1px solid" in render_blocks_html([with_rule])
        assert "border-bottom: 1px solid" not in render_blocks_html([without_rule])


class TestDocxExport:
    """Exportação DOCX."""

    def test_generates_valid_docx(self, sample_petition):
        data = export_docx(sample_petition, title="Ação de Indenização")
        doc = _open_docx(data)
        assert doc.core_properties.title == "Ação de Indenização"

    def test_spacers_do_not_create_paragraphs(self, sample_petition):
        doc = _open_docx(export_docx(sample_petition))
        assert all(p.text.strip() for p in doc.paragraphs)

    def test_caption_centered_and_bold(self, sample_petition):
        doc = _open_docx(export_docx(sample_petition))
        caption = doc.paragraphs[0]
        assert caption.alignment == WD_ALIGN_PARAGRAPH.CENTER
        assert caption.runs[0].bold
        assert caption.text.startswith("EXCELENTÍSSIMO")

    def test_numbered_paragraph_with_inline_bold(self, sample_petition):
        doc = _open_docx(export_docx(sample_petition))
        paragraph = next(p for p in doc.paragraphs if p.text.startswith("1. "))
        assert paragraph.runs[0].text == "1. "
        assert paragraph.runs[0].bold
        bold_runs = [run.text for run in paragraph.runs[1:] if run.bold]
        assert bold_runs == ["contrato"]
        assert "**" not in paragraph.text

    def test_party_label_bold(self, sample_petition):
        doc = _open_docx(export_docx(sample_petition))
        paragraph = next(p for p in doc.paragraphs if p.text.startswith("REQUERENTE"))
        assert paragraph.runs[0].text == "REQUERENTE:"
        assert paragraph.runs[0].bold
        assert not paragraph.runs[1].bold

    def test_signature_has_line(self, sample_petition):
        doc = _open_docx(export_docx(sample_petition))
        texts = [p.text for p in doc.paragraphs]
        index = texts.index("OAB/MS 12.345")
        assert set(texts[index - 1]) == {"_"}

    def test_rule_line_follows_block_flag(self):
        exporter = DocxExporter()
        doc = Document()
        exporter._add_blocks(doc, [
            Block(kind=BlockKind.PARAGRAPH, text="Com linha", source="Com linha", rule_above=True),
            Block(kind=BlockKind.SIGNATURE, text="Sem linha", source="Sem linha"),
        ])
        texts = [p.text for p in doc.paragraphs]
        assert texts == ["_" * 40, "Com linha", "Sem linha"]

    def test_control_characters_removed(self):
        """Caracteres de controle colados do Word não quebram a exportação."""
        doc = _open_docx(export_docx("Texto\x0b com\x0c controle", title="T\x01itulo"))
        assert doc.paragraphs[0].text == "Texto com controle"
        assert doc.core_properties.title == "Titulo"

    def test_custom_font(self):
        doc = _open_docx(DocxExporter(RenderOptions(font_family="Arial")).export("Texto"))
        assert doc.styles["Normal"].font.name == "Arial"

    def test_empty_content(self):
        """Conteúdo vazio gera documento válido sem parágrafos de texto."""
        doc = _open_docx(export_docx(""))
        assert all(not p.text for p in doc.paragraphs)

    def test_failure_raises_export_error(self):
        with patch(
            "services.petition_renderer.docx_export.Document",
            side_effect=RuntimeError("disco cheio"),
        ):
            with pytest.raises(DocumentExportError) as exc_info:
                export_docx("Texto")

        error = exc_info.value
        assert error.code == "EXPORT_ERROR"
        assert error.details["format"] == "docx"
        assert error.to_dict()["error"] == "EXPORT_ERROR"


class TestJsonExport:
    """Exportação JSON e nomes de arquivo."""

    def test_export_json(self):
        petition = PetitionExportRequest(
            title="Ação de Cobrança",
            content="**Texto**",
            category="civel",
            clientName="Maria",
            createdAt="2024-03-10T12:00:00Z",
        )
        exported_at = datetime(2024, 3, 11, 9, 30, tzinfo=timezone.utc)

        assert export_json(petition, exported_at) == {
            "title": "Ação de Cobrança",
            "content": "**Texto**",
            "category": "civel",
            "clientName": "Maria",
            "createdAt": "2024-03-10T12:00:00Z",
            "exportedAt": "2024-03-11T09:30:00+00:00",
            "version": "1.0",
        }

    def test_export_json_default_timestamp(self):
        data = export_json(PetitionExportRequest(content="x"))
        assert data["exportedAt"].endswith("+00:00")
        assert data["clientName"] is None

    @pytest.mark.parametrize("title,expected", [
        ("Ação de Cobrança", "a__o_de_cobran_a.docx"),
        ("Petição Inicial 2024", "peti__o_inicial_2024.docx"),
        ("", "peticao.docx"),
    ])
    def test_export_filename(self, title, expected):
        assert export_filename(title, "docx") == expected

    def test_export_text(self):
        text = '**Negrito** e *itálico*\n<div style="text-align: center">Centro</div>'
        assert export_text(text) == "Negrito e itálico\nCentro"
