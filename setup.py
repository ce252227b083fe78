"""
Setup script para instalação do serviço de petições.

Este arquivo permite instalar o projeto em modo editable para desenvolvimento:
    pip install -e .[test]

Isso adiciona o projeto ao PYTHONPATH e permite imports como:
    from services.petition_renderer import render
"""

from setuptools import setup, find_packages

setup(
    name="servico-peticoes",
    version="1.0.0",
    description="Editor de pseudo-marcação e renderizador de petições jurídicas",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    package_data={
        "services.petition_renderer": ["templates/*.html"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.0",
        "python-docx>=1.1",
        "jinja2>=3.1",
        "structlog>=24.1",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
)
