import pytest

from matecheck.adapters.memory_output import MemoryOutput
from matecheck.rules import Rules, load_rules


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the bundled rules file."""
    return load_rules()


@pytest.fixture
def memory_out() -> MemoryOutput:
    return MemoryOutput()


@pytest.fixture
def golden_transcript() -> str:
    """Full console output of a default run."""
    lines = [
        "",
        "====================================",
        "   DESAFIO DE XADREZ - MATECHECK   ",
        "====================================",
        "",
        "========== NIVEL NOVATO ==========",
        "",
        "Bispo: 5 casas na diagonal superior direita",
        *(["Direita", "Cima"] * 5),
        "",
        "Torre: 5 casas para a direita",
        *(["Direita"] * 5),
        "",
        "Rainha: 8 casas para a esquerda",
        *(["Esquerda"] * 8),
        "",
        "========== NIVEL AVENTUREIRO ==========",
        "",
        "Cavalo: Movimento em L (2 casas para baixo e 1 casa para esquerda)",
        "Baixo",
        "Esquerda",
        "Baixo",
        "Esquerda",
        "",
        "========== NIVEL MESTRE ==========",
        "",
        "Bispo: 5 casas na diagonal direita para cima (recursivo)",
        *(["Direita", "Cima"] * 5),
        "",
        "Torre: 5 casas para a direita (recursivo)",
        *(["Direita"] * 5),
        "",
        "Rainha: 8 casas para a esquerda (recursivo)",
        *(["Esquerda"] * 8),
        "",
        "Cavalo: 1 vez em L para cima a direita (loops com break/continue)",
        "Cima",
        "Cima",
        "Direita",
        "",
        "========== FIM ==========",
        "",
    ]
    return "".join(f"{line}\n" for line in lines)
