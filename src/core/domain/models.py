"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El decodificado del payload y la validación estructural (tipos) ocurren en
  el borde, con un único error legible si el documento no encaja.
- Los modelos son inmutables (`frozen`): las reglas solo leen el documento.

Nota:
- Los nombres de campo en Python describen el concepto; los alias son los
  nombres del recurso en el wire (snake_case del CR).
- Igual que un decodificador de valores cero, todo campo ausente (o `null`)
  toma un valor vacío: exigir campos es responsabilidad del esquema
  estructural, no de este validador.
- El decodificado es estricto (`decode_app`): un string donde va un bool o un
  entero es un error de decodificado, no se convierte.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class _DocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Un `null` explícito equivale a un campo ausente: queda el valor vacío.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Label(_DocumentModel):
    name: str = ""
    description: str = ""


class Endpoint(_DocumentModel):
    """Endpoint descriptor of a service."""

    port: int | None = None
    path: str | None = None
    url_scheme: str | None = Field(
        default=None,
        description="URL scheme (http, https, ...). Required for dashboards.",
    )
    is_dashboard: bool = Field(
        default=False,
        description="Whether the endpoint serves a web dashboard.",
    )


class Service(_DocumentModel):
    """A named capability exposed by the application."""

    id: str = Field(default="", description="Service identifier, unique in the document.")
    label: Label = Field(default_factory=Label)
    endpoint: Endpoint = Field(default_factory=Endpoint)


class Role(_DocumentModel):
    """A node-type definition, optionally carrying its own image."""

    id: str = Field(default="", description="Role identifier, unique in the document.")
    cardinality: str | None = None
    image: str | None = Field(
        default=None,
        alias="image_repo_tag",
        description="Container image for this role; falls back to the default image.",
    )

    @property
    def has_image(self) -> bool:
        return bool(self.image)


class RoleServiceBinding(_DocumentModel):
    """Binds one role to the services it runs, inside the config section."""

    role_id: str = Field(default="")
    service_ids: list[str] = Field(default_factory=list)


class AppConfig(_DocumentModel):
    """Config section: which roles are selected and which services they run."""

    selected_roles: list[str] = Field(default_factory=list)
    role_services: list[RoleServiceBinding] = Field(default_factory=list)


class AppSpec(_DocumentModel):
    label: Label = Field(default_factory=Label)
    distro_id: str = ""
    version: str = ""
    default_image: str | None = Field(
        default=None,
        alias="default_image_repo_tag",
        description="Top-level image used by roles that do not declare their own.",
    )
    node_roles: list[Role] = Field(default_factory=list, alias="roles")
    services: list[Service] = Field(default_factory=list)
    config: AppConfig = Field(default_factory=AppConfig)

    @property
    def has_default_image(self) -> bool:
        return bool(self.default_image)


class ObjectMeta(_DocumentModel):
    name: str | None = None
    namespace: str | None = None
    uid: str | None = None


class ApplicationDefinition(_DocumentModel):
    """Agregado principal: el documento de definición de aplicación.

    Por qué un agregado:
    - Es la unidad que entra por el gate de admisión; se construye por llamada
      y se descarta al responder.
    """

    api_version: str = Field(default="", alias="apiVersion")
    kind: str = ""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: AppSpec = Field(default_factory=AppSpec)

    @property
    def node_roles(self) -> list[Role]:
        return self.spec.node_roles

    @property
    def services(self) -> list[Service]:
        return self.spec.services

    @property
    def config(self) -> AppConfig:
        return self.spec.config

    @property
    def default_image(self) -> str | None:
        return self.spec.default_image
