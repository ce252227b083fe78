# services/petition_renderer/html_export.py
"""
Exportação dos blocos classificados como fragmento HTML.

Usado na pré-visualização e na cópia formatada. Os estilos são inline e
derivam de RenderOptions; todo texto passa pelo autoescape do Jinja2.
"""

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import Block, BlockKind, RenderOptions, TextSize
from .renderer import petition_renderer


TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

# Tamanho relativo à fonte base
SIZE_SCALE = {
    TextSize.SMALL: "0.875em",
    TextSize.NORMAL: "1em",
    TextSize.LARGE: "1.125em",
    TextSize.XLARGE: "1.25em",
}

HEADING_TAGS = {
    BlockKind.MAIN_CAPTION: "h1",
    BlockKind.ACTION_TITLE: "h2",
    BlockKind.SECTION_HEADING: "h3",
}


def block_tag(block: Block) -> str:
    """Tag HTML usada para o bloco."""
    return HEADING_TAGS.get(block.kind, "p")


def block_style(block: Block, options: RenderOptions) -> str:
    """Monta o atributo style do bloco."""
    palette = options.palette
    rules = [
        f"text-align: {block.align.value}",
        f"font-size: {SIZE_SCALE[block.size]}",
        "margin: 0 0 1em 0",
    ]
    if block.bold:
        rules.append("font-weight: bold")
    if block.italic:
        rules.append("font-style: italic")
    if block.uppercase:
        rules.append("text-transform: uppercase")
    if block.indent:
        rules.append("text-indent: 2em")
    if block.border_below:
        rules.append(f"border-bottom: 2px solid {palette.border}")
        rules.append("padding-bottom: 0.5em")
    if block.kind == BlockKind.LETTERED_ITEM:
        rules.append("margin-left: 1em")
    if block.rule_above:
        rules.append("margin-top: 2em")

    if block.kind in HEADING_TAGS:
        rules.append(f"color: {palette.heading}")
    elif block.kind == BlockKind.PLACEHOLDER:
        rules.append(f"color: {palette.muted}")

    return "; ".join(rules)


def render_blocks_html(blocks: List[Block], options: Optional[RenderOptions] = None) -> str:
    """Gera o HTML de uma lista de blocos já classificados."""
    options = options or RenderOptions()
    template = _env.get_template("petition.html")
    return template.render(
        blocks=blocks,
        styles=[block_style(block, options) for block in blocks],
        tags=[block_tag(block) for block in blocks],
        options=options,
        palette=options.palette,
    )


def render_html(content: Optional[str], options: Optional[RenderOptions] = None) -> str:
    """
    Classifica o conteúdo e devolve o fragmento HTML correspondente.

    Args:
        content: Conteúdo da petição
        options: Fonte, tamanho e paleta (padrões de config se None)

    Returns:
        String HTML com um <div class="legal-document"> raiz
    """
    return render_blocks_html(petition_renderer.render(content), options)
