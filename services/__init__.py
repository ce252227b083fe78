# services/__init__.py
"""
Serviços de petições

Nota: Os imports são feitos através de __getattr__ para suportar lazy loading
e evitar problemas com importação durante testes.
"""

__all__ = [
    # Editor
    "petition_editor",
    "apply_formatting",
    "insert_template",

    # Renderizador
    "render",
    "classify_line",
]


def __getattr__(name: str):
    """
    Lazy loading de atributos para evitar problemas de importação circular.
    """
    if name in ("petition_editor", "apply_formatting", "insert_template"):
        from services.petition_markup import editor
        return getattr(editor, name)

    elif name in ("render", "classify_line"):
        from services.petition_renderer import renderer
        return getattr(renderer, name)

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
