"""API: camada de borda por provider.

Subpastas:
- connectors/: schemas master, variantes derivadas e conectores por provider
- validators/: custom validators usados pelos schemas de provider

NÃO PODE conter: regras do engine de schema (ficam em channel_schema/).
"""
