"""Contrato del catálogo de la aplicación.

Por qué Protocol:
- Las reglas necesitan las listas de IDs declarados y una forma de resolver un
  rol por ID, pero no deben fijar *cómo* se resuelve (igualdad exacta, alias,
  mayúsculas...).
- Permite sustituir la resolución sin tocar las reglas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ApplicationDefinition, Role


@runtime_checkable
class AppCatalog(Protocol):
    """Lookup capabilities over a decoded application definition.

    Rules:
    - ID lists are returned in declaration order, duplicates included.
    - `get_role` returns None when the identifier does not resolve.
    """

    def all_role_ids(self, app: ApplicationDefinition) -> list[str]:
        ...

    def all_service_ids(self, app: ApplicationDefinition) -> list[str]:
        ...

    def get_role(self, app: ApplicationDefinition, role_id: str) -> Role | None:
        """Resolve a role identifier to its definition in `app`."""

        ...
