"""Tests for AdmissionReview dispatch by resource kind."""

from __future__ import annotations

import json

from core.config import GateSettings
from core.domain.admission import AdmissionResponse, AdmissionReview
from core.services.admission import build_admit_funcs, review, review_payload


def _review_doc(obj, kind: str = "KubeDirectorApp", uid: str = "abc-123") -> dict:
    return {
        "apiVersion": "admission.k8s.io/v1beta1",
        "kind": "AdmissionReview",
        "request": {
            "uid": uid,
            "kind": {"group": "kubedirector.bluedata.io", "version": "v1alpha1", "kind": kind},
            "operation": "CREATE",
            "namespace": "default",
            "name": "spark",
            "object": obj,
        },
    }


def _funcs(settings: GateSettings):
    return build_admit_funcs(settings)


class TestReviewPayload:
    def test_valid_app_allowed(self, app_doc, settings):
        raw = json.dumps(_review_doc(app_doc))
        answer = review_payload(raw, admit_funcs=_funcs(settings))
        assert answer.response.allowed
        assert answer.response.uid == "abc-123"
        assert answer.request is None

    def test_invalid_app_rejected(self, app_doc, settings):
        app_doc["spec"]["roles"].append({"id": "worker"})
        answer = review_payload(json.dumps(_review_doc(app_doc)), admit_funcs=_funcs(settings))
        assert not answer.response.allowed
        assert answer.response.uid == "abc-123"
        assert "Each role must have a unique ID." in answer.response.result.message

    def test_wire_shape(self, app_doc, settings):
        app_doc["spec"]["config"]["selected_roles"] = ["ghost"]
        answer = review_payload(json.dumps(_review_doc(app_doc)), admit_funcs=_funcs(settings))
        wire = answer.to_wire()
        assert wire["apiVersion"] == "admission.k8s.io/v1beta1"
        assert wire["kind"] == "AdmissionReview"
        assert "request" not in wire
        assert wire["response"]["allowed"] is False
        assert wire["response"]["result"]["message"].startswith("\nSelected role ID(ghost)")

    def test_other_kinds_pass_through(self, settings):
        raw = json.dumps(_review_doc({"spec": {"roles": "not-a-list"}}, kind="KubeDirectorCluster"))
        answer = review_payload(raw, admit_funcs=_funcs(settings))
        assert answer.response.allowed

    def test_undecodable_envelope(self, settings):
        answer = review_payload(b"not json", admit_funcs=_funcs(settings))
        assert not answer.response.allowed
        assert answer.response.result.message.startswith("\n")

    def test_app_kind_from_settings(self, app_doc):
        settings = GateSettings(_env_file=None, app_kind="ApplicationDefinition")
        app_doc["spec"]["roles"].append({"id": "worker"})
        funcs = _funcs(settings)
        assert set(funcs) == {"ApplicationDefinition"}

        routed = review_payload(json.dumps(_review_doc(app_doc, kind="ApplicationDefinition")), admit_funcs=funcs)
        skipped = review_payload(json.dumps(_review_doc(app_doc)), admit_funcs=funcs)
        assert not routed.response.allowed
        assert skipped.response.allowed


class TestReview:
    def test_missing_request_rejected(self):
        answer = review(AdmissionReview())
        assert not answer.response.allowed
        assert "no request" in answer.response.message

    def test_uid_echoed_from_request(self, app_doc):
        def _admit(request, handler_state):
            return AdmissionResponse(uid="something-else", allowed=True)

        admission_review = AdmissionReview.model_validate(_review_doc(app_doc, uid="uid-9"))
        answer = review(admission_review, admit_funcs={"KubeDirectorApp": _admit})
        assert answer.response.uid == "uid-9"

    def test_handler_state_forwarded(self, app_doc):
        seen = []

        def _admit(request, handler_state):
            seen.append(handler_state)
            return AdmissionResponse(allowed=True)

        state = object()
        admission_review = AdmissionReview.model_validate(_review_doc(app_doc))
        review(admission_review, state, admit_funcs={"KubeDirectorApp": _admit})
        assert seen == [state]
