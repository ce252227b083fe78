# tests/conftest.py
"""
Configuração global do pytest para o serviço de petições.

Este arquivo é executado automaticamente pelo pytest antes dos testes.
"""

import sys
import os

# Adiciona o diretório raiz do projeto ao PYTHONPATH
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Configura variáveis de ambiente para testes
os.environ.setdefault("ENV", "test")


import pytest


# Partes começam na linha 6, fora da janela do título da ação (linhas 0-4)
SAMPLE_PETITION = """EXCELENTÍSSIMO SENHOR DOUTOR JUIZ DE DIREITO DA VARA CÍVEL DA COMARCA DE CAMPO GRANDE



AÇÃO DE INDENIZAÇÃO POR DANOS MORAIS

REQUERENTE: Maria da Silva, brasileira, casada
REQUERIDO: Empresa Exemplo Ltda., CNPJ: 00.000.000/0001-00

DOS FATOS

1. A autora contratou os serviços da ré em janeiro de 2024, conforme **contrato** anexo.

2. Os serviços não foram prestados no prazo combinado.

DOS PEDIDOS

a) A citação da ré para, querendo, contestar a presente ação;

b) A procedência do pedido.

Nestes termos,
Pede deferimento.

Campo Grande, 10 de março de 2024.

Advogada Responsável
OAB/MS 12.345"""


@pytest.fixture
def sample_petition() -> str:
    """Petição completa usada em vários testes."""
    return SAMPLE_PETITION
