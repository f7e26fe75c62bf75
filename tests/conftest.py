"""Shared fixtures: a valid application definition to mutate per test."""

from __future__ import annotations

import copy
import json

import pytest

from core.config import GateSettings

_VALID_APP = {
    "apiVersion": "kubedirector.bluedata.io/v1alpha1",
    "kind": "KubeDirectorApp",
    "metadata": {"name": "spark", "namespace": "default"},
    "spec": {
        "label": {"name": "Spark 2.2", "description": "Spark with Jupyter"},
        "distro_id": "bluedata/spark",
        "version": "2.2",
        "default_image_repo_tag": "docker.io/example/spark:2.2",
        "roles": [
            {"id": "controller", "cardinality": "1"},
            {"id": "worker", "cardinality": "0+", "image_repo_tag": "docker.io/example/spark-worker:2.2"},
            {"id": "jupyter", "cardinality": "0+"},
        ],
        "services": [
            {"id": "ssh", "label": {"name": "SSH"}, "endpoint": {"port": 22, "is_dashboard": False}},
            {
                "id": "spark-ui",
                "label": {"name": "Spark master"},
                "endpoint": {"port": 8080, "url_scheme": "http", "is_dashboard": True},
            },
            {
                "id": "jupyter-nb",
                "endpoint": {"port": 8888, "url_scheme": "http", "path": "/", "is_dashboard": True},
            },
        ],
        "config": {
            "selected_roles": ["controller", "worker", "jupyter"],
            "role_services": [
                {"role_id": "controller", "service_ids": ["ssh", "spark-ui"]},
                {"role_id": "worker", "service_ids": ["ssh"]},
                {"role_id": "jupyter", "service_ids": ["ssh", "jupyter-nb"]},
            ],
        },
    },
}


@pytest.fixture
def app_doc() -> dict:
    """A fresh, valid application document (safe to mutate)."""
    return copy.deepcopy(_VALID_APP)


@pytest.fixture
def to_payload():
    def _to_payload(doc: dict) -> bytes:
        return json.dumps(doc).encode("utf-8")

    return _to_payload


@pytest.fixture
def settings() -> GateSettings:
    return GateSettings(_env_file=None)
