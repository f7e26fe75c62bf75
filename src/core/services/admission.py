"""Admission review dispatch.

Routes an AdmissionReview to the admit function registered for the wrapped
resource kind and wraps the answer back into a review. Kinds without a
registered rule set are allowed unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable

from pydantic import ValidationError

from core.config import GateSettings
from core.domain.admission import AdmissionRequest, AdmissionResponse, AdmissionReview, Status
from core.services.app_validator import AppValidator, admit_app_cr

logger = logging.getLogger(__name__)

AdmitFunc = Callable[[AdmissionRequest, object | None], AdmissionResponse]


def build_admit_funcs(
    settings: GateSettings | None = None,
    validator: AppValidator | None = None,
) -> dict[str, AdmitFunc]:
    """Map resource kind -> admit function for the given settings."""

    settings = settings or GateSettings()
    validator = validator or AppValidator(settings=settings)

    def _admit_app(request: AdmissionRequest, handler_state: object | None) -> AdmissionResponse:
        return admit_app_cr(request, handler_state, validator=validator)

    return {settings.app_kind: _admit_app}


def _rejected_review(message: str, uid: str = "") -> AdmissionReview:
    return AdmissionReview(
        response=AdmissionResponse(uid=uid, allowed=False, result=Status(message="\n" + message)),
    )


def review(
    admission_review: AdmissionReview,
    handler_state: object | None = None,
    *,
    admit_funcs: dict[str, AdmitFunc] | None = None,
) -> AdmissionReview:
    """Answer an AdmissionReview with the matching rule set's decision."""

    request = admission_review.request
    if request is None:
        logger.warning("AdmissionReview without a request")
        return _rejected_review("AdmissionReview has no request.")

    funcs = admit_funcs if admit_funcs is not None else build_admit_funcs()
    admit = funcs.get(request.kind.kind)
    if admit is None:
        logger.debug("No rule set for kind %r; allowing %s", request.kind.kind, request.uid)
        response = AdmissionResponse(uid=request.uid, allowed=True)
    else:
        response = admit(request, handler_state)
        response.uid = request.uid

    return AdmissionReview(
        api_version=admission_review.api_version,
        kind=admission_review.kind,
        response=response,
    )


def review_payload(
    raw: bytes | str,
    handler_state: object | None = None,
    *,
    admit_funcs: dict[str, AdmitFunc] | None = None,
) -> AdmissionReview:
    """Decode an AdmissionReview from JSON and answer it."""

    try:
        admission_review = AdmissionReview.model_validate_json(raw)
    except ValidationError as exc:
        logger.info("AdmissionReview payload could not be decoded")
        return _rejected_review(str(exc))
    return review(admission_review, handler_state, admit_funcs=admit_funcs)
