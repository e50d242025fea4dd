"""
Seed do banco de dados.

Pode ser executado com: python -m restaurante_api.seeds
"""
