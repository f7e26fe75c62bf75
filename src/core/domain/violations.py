"""Violaciones de reglas y sus plantillas de mensaje.

Por qué registros en vez de strings:
- Las reglas devuelven datos (tipo + parámetros); el texto se genera solo en
  el borde (respuesta de admisión / CLI).
- Permite testear las reglas sin depender del formato exacto del mensaje.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ViolationKind(str, Enum):
    NON_UNIQUE_ROLE_ID = "non_unique_role_id"
    NON_UNIQUE_SERVICE_ID = "non_unique_service_id"
    NON_UNIQUE_SELECTED_ROLE = "non_unique_selected_role"
    NON_UNIQUE_SERVICE_ROLE = "non_unique_service_role"
    INVALID_NODE_ROLE_ID = "invalid_node_role_id"
    INVALID_SERVICE_ID = "invalid_service_id"
    INVALID_SELECTED_ROLE_ID = "invalid_selected_role_id"
    NO_DEFAULT_IMAGE = "no_default_image"
    NO_URL_SCHEME = "no_url_scheme"

    @property
    def template(self) -> str:
        return MESSAGE_TEMPLATES[self]


MESSAGE_TEMPLATES: Mapping[ViolationKind, str] = MappingProxyType(
    {
        ViolationKind.NON_UNIQUE_ROLE_ID: "Each role must have a unique ID.",
        ViolationKind.NON_UNIQUE_SERVICE_ID: "Each service must have a unique ID.",
        ViolationKind.NON_UNIQUE_SELECTED_ROLE: "Each element of selected_roles must be unique.",
        ViolationKind.NON_UNIQUE_SERVICE_ROLE: (
            "Each element of role_services must have a unique role_id."
        ),
        ViolationKind.INVALID_NODE_ROLE_ID: (
            "Config role ID({0}) is not a valid role ID. Valid role IDs are: {1}"
        ),
        ViolationKind.INVALID_SERVICE_ID: (
            "Config service ID({0}) is not a valid service ID. Valid service IDs are: {1}"
        ),
        ViolationKind.INVALID_SELECTED_ROLE_ID: (
            "Selected role ID({0}) is not a valid role ID. Valid role IDs are: {1}"
        ),
        ViolationKind.NO_DEFAULT_IMAGE: (
            "Top-level default_image_repo_tag must be specified if any role lacks an image_repo_tag."
        ),
        ViolationKind.NO_URL_SCHEME: (
            "The endpoint for service({0}) must include url_scheme because is_dashboard is true."
        ),
    }
)


@dataclass(frozen=True)
class Violation:
    """A single rule violation: which template, with which parameters."""

    kind: ViolationKind
    params: tuple[str, ...] = ()

    def render(self) -> str:
        return self.kind.template.format(*self.params)

    def __str__(self) -> str:
        return self.render()
