"""Validators reutilizados por mais de um canal."""

from api.validators.shared.json_content import json_validator

__all__ = ["json_validator"]
