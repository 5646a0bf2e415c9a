"""
Fixed seed set for the in-memory people store.

Thirty records with sequential identifiers (``12345678901`` to
``12345678930``).  Tests and demos rely on this exact content, so
entries must not be reordered.
"""

from typing import Dict, List, Tuple

# identifier, name, genre, address, age, neighborhood, region
_SEED_ROWS: List[Tuple[str, str, str, str, int, str, str]] = [
    ("12345678901", "João Silva", "Masculino", "Rua das Flores, 123", 30, "Centro", "São Paulo"),
    ("12345678902", "Maria Santos", "Feminino", "Avenida Paulista, 456", 25, "Bela Vista", "Rio de Janeiro"),
    ("12345678903", "Pedro Oliveira", "Masculino", "Rua Augusta, 789", 35, "Consolação", "Minas Gerais"),
    ("12345678904", "Ana Costa", "Feminino", "Rua Oscar Freire, 321", 28, "Jardins", "Bahia"),
    ("12345678905", "Carlos Ferreira", "Masculino", "Avenida Faria Lima, 654", 42, "Itaim Bibi", "Paraná"),
    ("12345678906", "Lucia Almeida", "Feminino", "Rua Haddock Lobo, 987", 33, "Cerqueira César", "Rio Grande do Sul"),
    ("12345678907", "Roberto Lima", "Masculino", "Avenida Rebouças, 147", 29, "Pinheiros", "Santa Catarina"),
    ("12345678908", "Fernanda Rocha", "Feminino", "Rua Teodoro Sampaio, 258", 31, "Pinheiros", "Pernambuco"),
    ("12345678909", "Marcos Pereira", "Masculino", "Avenida Brigadeiro Luiz Antonio, 369", 27, "Bela Vista", "Ceará"),
    ("12345678910", "Juliana Martins", "Feminino", "Rua da Consolação, 741", 26, "Consolação", "Goiás"),
    ("12345678911", "Antonio Souza", "Masculino", "Avenida 9 de Julho, 852", 38, "Bela Vista", "São Paulo"),
    ("12345678912", "Patricia Gomes", "Feminino", "Rua Bela Cintra, 963", 24, "Jardins", "Rio de Janeiro"),
    ("12345678913", "Rafael Barbosa", "Masculino", "Avenida Paulista, 159", 36, "Bela Vista", "Minas Gerais"),
    ("12345678914", "Camila Dias", "Feminino", "Rua Augusta, 357", 29, "Consolação", "Bahia"),
    ("12345678915", "Diego Nascimento", "Masculino", "Avenida Faria Lima, 468", 32, "Itaim Bibi", "Paraná"),
    ("12345678916", "Beatriz Cardoso", "Feminino", "Rua Oscar Freire, 579", 27, "Jardins", "Rio Grande do Sul"),
    ("12345678917", "Gabriel Moreira", "Masculino", "Avenida Rebouças, 680", 34, "Pinheiros", "Santa Catarina"),
    ("12345678918", "Larissa Vieira", "Feminino", "Rua Teodoro Sampaio, 791", 25, "Pinheiros", "Pernambuco"),
    ("12345678919", "Thiago Correia", "Masculino", "Avenida Brigadeiro Luiz Antonio, 802", 30, "Bela Vista", "Ceará"),
    ("12345678920", "Mariana Lopes", "Feminino", "Rua da Consolação, 913", 28, "Consolação", "Goiás"),
    ("12345678921", "Felipe Ribeiro", "Masculino", "Avenida 9 de Julho, 124", 33, "Bela Vista", "São Paulo"),
    ("12345678922", "Isabela Cunha", "Feminino", "Rua Bela Cintra, 235", 26, "Jardins", "Rio de Janeiro"),
    ("12345678923", "Bruno Mendes", "Masculino", "Avenida Paulista, 346", 31, "Bela Vista", "Minas Gerais"),
    ("12345678924", "Natália Araújo", "Feminino", "Rua Augusta, 457", 29, "Consolação", "Bahia"),
    ("12345678925", "Vinicius Castro", "Masculino", "Avenida Faria Lima, 568", 35, "Itaim Bibi", "Paraná"),
    ("12345678926", "Amanda Freitas", "Feminino", "Rua Oscar Freire, 679", 24, "Jardins", "Rio Grande do Sul"),
    ("12345678927", "Leonardo Monteiro", "Masculino", "Avenida Rebouças, 780", 37, "Pinheiros", "Santa Catarina"),
    ("12345678928", "Carolina Nunes", "Feminino", "Rua Teodoro Sampaio, 891", 32, "Pinheiros", "Pernambuco"),
    ("12345678929", "Rodrigo Campos", "Masculino", "Avenida Brigadeiro Luiz Antonio, 902", 28, "Bela Vista", "Ceará"),
    ("12345678930", "Vanessa Andrade", "Feminino", "Rua da Consolação, 113", 30, "Consolação", "Goiás"),
]

_FIELDS = ("identifier", "name", "genre", "address", "age", "neighborhood", "region")


def seed_people() -> List[Dict[str, object]]:
    """Return fresh dicts for every seed record, in identifier order."""
    return [dict(zip(_FIELDS, row)) for row in _SEED_ROWS]
