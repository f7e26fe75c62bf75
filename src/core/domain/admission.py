"""Admission review envelope (admission.k8s.io/v1beta1).

The gate receives the document wrapped in an AdmissionReview and answers with
the same envelope carrying an AdmissionResponse. Only the fields the gate
reads or writes are modelled; everything else is ignored on decode.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

ADMISSION_API_VERSION = "admission.k8s.io/v1beta1"


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GroupVersionKind(_EnvelopeModel):
    group: str = ""
    version: str = ""
    kind: str = ""


class AdmissionRequest(_EnvelopeModel):
    uid: str = ""
    kind: GroupVersionKind = Field(default_factory=GroupVersionKind)
    operation: str = Field(default="", description="CREATE, UPDATE, DELETE or CONNECT.")
    namespace: str = ""
    name: str = ""
    object: Any = Field(
        default=None,
        description="The document under admission, kept as raw JSON until decoded.",
    )

    def raw_object(self) -> bytes:
        """Serialize the wrapped object back to JSON bytes for decoding."""

        return json.dumps(self.object).encode("utf-8")


class Status(_EnvelopeModel):
    message: str = ""


class AdmissionResponse(_EnvelopeModel):
    uid: str = ""
    allowed: bool = False
    result: Status | None = None

    @property
    def message(self) -> str:
        return self.result.message if self.result else ""


class AdmissionReview(_EnvelopeModel):
    api_version: str = Field(default=ADMISSION_API_VERSION, alias="apiVersion")
    kind: str = "AdmissionReview"
    request: AdmissionRequest | None = None
    response: AdmissionResponse | None = None

    def to_wire(self) -> dict[str, Any]:
        """Dump using wire names, omitting unset sections."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
