# services/petition_markup/templates.py
"""
Seções padronizadas (boilerplate) inseridas pelos botões do editor.

Os textos seguem as convenções das petições iniciais: títulos de seção em
maiúsculas, itens numerados nos fatos e no direito, alíneas nos pedidos e
fecho com local, data e assinatura.
"""

from .models import TemplateKind


FACTS_TEMPLATE = (
    "\n\nDOS FATOS\n\n"
    "1. Em [data], ocorreu [descrição do fato];\n\n"
    "2. Em seguida, [continuação dos fatos];\n\n"
    "3. [Continuar a narrativa];\n\n"
)

LAW_TEMPLATE = (
    "\n\nDO DIREITO\n\n"
    "A presente demanda encontra amparo legal nos seguintes dispositivos:\n\n"
    "1. Conforme o Art. [número] da [legislação], [citar texto legal];\n\n"
    "2. Segundo o Art. [número] do [código], [citar texto legal];\n\n"
    "3. A jurisprudência do [tribunal] tem se firmado no sentido de que [citar entendimento];\n\n"
)

REQUESTS_TEMPLATE = (
    "\n\nDOS PEDIDOS\n\n"
    "Ante o exposto, requer a Vossa Excelência:\n\n"
    "a) A citação do réu para, querendo, contestar a presente ação;\n\n"
    "b) A procedência do pedido para [descrever pedido principal];\n\n"
    "c) A condenação do réu em custas e honorários advocatícios;\n\n"
    "d) A produção de provas por todos os meios admitidos em direito;\n\n"
)

CLOSURE_TEMPLATE = (
    "\n\nNestes termos,\n"
    "Pede deferimento.\n\n"
    "[Cidade], [data].\n\n"
    "[Nome do Advogado]\n"
    "OAB/[Estado] [número]\n"
)

TEMPLATES = {
    TemplateKind.FACTS: FACTS_TEMPLATE,
    TemplateKind.LAW: LAW_TEMPLATE,
    TemplateKind.REQUESTS: REQUESTS_TEMPLATE,
    TemplateKind.CLOSURE: CLOSURE_TEMPLATE,
}

# Rótulos dos botões da interface
TEMPLATE_LABELS = {
    TemplateKind.FACTS: "Inserir Fatos",
    TemplateKind.LAW: "Inserir Fundamento Legal",
    TemplateKind.REQUESTS: "Inserir Pedidos",
    TemplateKind.CLOSURE: "Inserir Fechamento",
}


def get_template(kind: TemplateKind) -> str:
    """Retorna o texto do template para o tipo informado."""
    return TEMPLATES[TemplateKind(kind)]
