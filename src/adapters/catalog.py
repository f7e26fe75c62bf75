"""Catálogo por defecto sobre el propio documento.

Resolución por igualdad exacta de ID: el primer rol declarado con ese ID gana.
"""

from __future__ import annotations

from core.domain.models import ApplicationDefinition, Role


class DocumentCatalog:
    """`AppCatalog` backed by the document's own role and service lists."""

    def all_role_ids(self, app: ApplicationDefinition) -> list[str]:
        return [role.id for role in app.node_roles]

    def all_service_ids(self, app: ApplicationDefinition) -> list[str]:
        return [service.id for service in app.services]

    def get_role(self, app: ApplicationDefinition, role_id: str) -> Role | None:
        for role in app.node_roles:
            if role.id == role_id:
                return role
        return None
