# tests/petition_markup/test_alignment_and_draft.py
"""
Testes das linhas etiquetadas, métricas, limpeza de marcação e rascunho.

Execução:
    pytest tests/petition_markup/ -v
"""

from services.petition_markup import (
    Alignment,
    DocumentMetrics,
    PetitionDraft,
    TaggedLine,
    clean_text,
    document_metrics,
    parse_tagged_lines,
    serialize_tagged_lines,
    unwrap_line,
    wrap_line,
)
from services.petition_markup.alignment import has_alignment_wrapper, parse_align_style


class TestTaggedLines:
    """Conversão entre wrapper <div> e TaggedLine."""

    def test_unwrap_center(self):
        line = '<div style="text-align: center">Brasília, 2024</div>'
        assert unwrap_line(line) == TaggedLine("Brasília, 2024", Alignment.CENTER)

    def test_unwrap_plain_line(self):
        assert unwrap_line("texto comum") == TaggedLine("texto comum", None)

    def test_unwrap_without_text_align_has_no_alignment(self):
        """Wrapper sem text-align não define alinhamento explícito."""
        line = '<div style="color: red">Texto</div>'
        assert unwrap_line(line) == TaggedLine("Texto", None)

    def test_unrecognized_text_align(self):
        assert parse_align_style("text-align: justify") is None

    def test_explicit_left(self):
        assert parse_align_style("text-align: left") == Alignment.LEFT

    def test_style_case_insensitive(self):
        assert parse_align_style("TEXT-ALIGN: RIGHT") == Alignment.RIGHT

    def test_text_outside_wrapper_preserved(self):
        line = 'Antes <div style="text-align: right">dentro</div> depois'
        tagged = unwrap_line(line)
        assert tagged.text == "Antes dentro depois"
        assert tagged.align == Alignment.RIGHT

    def test_wrap_line_without_alignment(self):
        assert wrap_line("texto", None) == "texto"

    def test_has_alignment_wrapper(self):
        assert has_alignment_wrapper(wrap_line("x", Alignment.CENTER))
        assert not has_alignment_wrapper("x")

    def test_parse_empty_content(self):
        assert parse_tagged_lines("") == []

    def test_serialize_restores_content(self):
        content = 'Título\n<div style="text-align: right">Campo Grande</div>\n'
        lines = parse_tagged_lines(content)
        assert len(lines) == 3
        assert lines[1].align == Alignment.RIGHT
        assert serialize_tagged_lines(lines) == content


class TestDocumentMetrics:
    """Linhas, palavras e caracteres do rodapé do editor."""

    def test_basic_metrics(self):
        assert document_metrics("abc\ndef gh") == DocumentMetrics(lines=2, words=3, characters=10)

    def test_empty_buffer(self):
        """Buffer vazio: 1 linha, 0 palavras, 0 caracteres."""
        assert document_metrics("") == DocumentMetrics(lines=1, words=0, characters=0)

    def test_whitespace_only(self):
        metrics = document_metrics("   \n  ")
        assert metrics.lines == 2
        assert metrics.words == 0
        assert metrics.characters == 6

    def test_markup_counts_as_characters(self):
        assert document_metrics("**a**").characters == 5

    def test_to_dict(self):
        assert document_metrics("a b").to_dict() == {"lines": 1, "words": 2, "characters": 3}


class TestCleanText:
    """Remoção da pseudo-marcação para texto puro."""

    def test_removes_emphasis_markers(self):
        assert clean_text("**Negrito** e *itálico* e __sublinhado__") == "Negrito e itálico e sublinhado"

    def test_removes_headers_and_tags(self):
        text = '# DOS FATOS\n<div style="text-align: center">Centro</div>'
        assert clean_text(text) == "DOS FATOS\nCentro"

    def test_decodes_entities(self):
        assert clean_text("A &amp; B &lt;x&gt;") == "A & B <x>"

    def test_empty(self):
        assert clean_text("") == ""


class TestPetitionDraft:
    """Rascunho em edição (conteúdo + cursor)."""

    def test_format_at_cursor(self):
        draft = PetitionDraft()
        draft.format("bold")
        assert draft.content == "****"
        assert draft.cursor == 2

    def test_type_inside_bold_markers(self):
        draft = PetitionDraft()
        draft.format("bold")
        draft.type_text("Requer")
        assert draft.content == "**Requer**"
        assert draft.cursor == 8

    def test_format_selection(self):
        draft = PetitionDraft(content="Brasília, 2024")
        draft.format("center", 0, 14)
        assert draft.content.startswith('<div style="text-align: center">')
        assert draft.cursor == len(draft.content)

    def test_insert_template_moves_cursor(self):
        draft = PetitionDraft(content="Petição", cursor=7)
        draft.insert_template("closure")
        assert draft.content.startswith("Petição\n\nNestes termos,")
        assert draft.cursor == len(draft.content)

    def test_metrics_follow_content(self):
        draft = PetitionDraft(content="abc\ndef gh")
        assert draft.metrics.words == 3

    def test_save_delegates_content(self):
        """Conteúdo vai sem alterações para o saver."""
        saved = []
        draft = PetitionDraft(content="**Texto**\n# Título")

        result = draft.save(lambda content: saved.append(content) or "ok")

        assert saved == ["**Texto**\n# Título"]
        assert result == "ok"
