"""Tests for the document catalog, list helpers and message templates."""

from __future__ import annotations

from adapters.catalog import DocumentCatalog
from core.domain.models import ApplicationDefinition
from core.domain.violations import MESSAGE_TEMPLATES, Violation, ViolationKind
from core.interfaces.catalog import AppCatalog
from core.shared import list_is_unique, string_in_list


def test_catalog_satisfies_protocol():
    assert isinstance(DocumentCatalog(), AppCatalog)


def test_ids_in_declaration_order_with_duplicates(app_doc):
    app_doc["spec"]["roles"].append({"id": "controller"})
    app = ApplicationDefinition.model_validate(app_doc)
    catalog = DocumentCatalog()
    assert catalog.all_role_ids(app) == ["controller", "worker", "jupyter", "controller"]
    assert catalog.all_service_ids(app) == ["ssh", "spark-ui", "jupyter-nb"]


def test_get_role_exact_match(app_doc):
    app = ApplicationDefinition.model_validate(app_doc)
    catalog = DocumentCatalog()
    role = catalog.get_role(app, "worker")
    assert role is not None
    assert role.image == "docker.io/example/spark-worker:2.2"
    assert catalog.get_role(app, "Worker") is None
    assert catalog.get_role(app, "") is None


def test_list_helpers():
    assert list_is_unique([])
    assert list_is_unique(["a", "b"])
    assert not list_is_unique(["a", "b", "a"])
    assert string_in_list("a", ["a", "b"])
    assert not string_in_list("c", ["a", "b"])


def test_every_kind_has_a_template():
    assert set(MESSAGE_TEMPLATES) == set(ViolationKind)


def test_templates_are_read_only():
    try:
        MESSAGE_TEMPLATES[ViolationKind.NO_URL_SCHEME] = "x"  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("templates must not be mutable")


def test_violation_render():
    violation = Violation(ViolationKind.INVALID_SERVICE_ID, ("ftp", "ssh,http"))
    assert str(violation) == (
        "Config service ID(ftp) is not a valid service ID. Valid service IDs are: ssh,http"
    )


def test_document_aliases(app_doc):
    app = ApplicationDefinition.model_validate(app_doc)
    assert app.api_version == "kubedirector.bluedata.io/v1alpha1"
    assert app.default_image == "docker.io/example/spark:2.2"
    assert [r.id for r in app.node_roles] == ["controller", "worker", "jupyter"]
    assert app.config.role_services[0].service_ids == ["ssh", "spark-ui"]
    assert app.services[1].endpoint.is_dashboard is True
