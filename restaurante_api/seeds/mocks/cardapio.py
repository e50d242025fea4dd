"""
Dados iniciais do cardápio.

Apenas os registros brutos, sem IDs (gerados pelo banco na inserção).
A ordem importa: as comandas de exemplo referenciam os IDs 1 a 6.
"""

CARDAPIO = [
    {
        "nome": "Prato Feito",
        "preco": 13.00,
        "descricao": "Arroz, feijão, bife e salada",
    },
    {
        "nome": "Suco de Laranja",
        "preco": 8.00,
        "descricao": "Suco natural 500ml",
    },
    {
        "nome": "Hambúrguer Artesanal",
        "preco": 35.00,
        "descricao": "Pão, carne 180g, queijo e batata",
    },
    {
        "nome": "Pizza Margherita",
        "preco": 40.00,
        "descricao": "Pizza tradicional italiana",
    },
    {
        "nome": "Refrigerante",
        "preco": 7.00,
        "descricao": "Lata 350ml",
    },
    {
        "nome": "Doce",
        "preco": 7.00,
        "descricao": "Sobremesa do dia",
    },
]
