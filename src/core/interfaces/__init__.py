"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para los colaboradores del validador
  (extracción de IDs, resolución de roles).
- Las reglas dependen de la abstracción; `adapters.catalog` da la implementación
  por defecto y los tests pueden inyectar otra.
"""

from core.interfaces.catalog import AppCatalog

__all__ = ["AppCatalog"]
