"""Application-definition rule checks.

Each check is a pure function over a `RuleContext` and returns the list of
violations it found (empty list = pass). Checks never raise and never depend
on each other's results, so the aggregator can run all of them on every
request and report every problem at once.

Every check takes a `stop_on_first` flag from its `RuleCheck` registration:
with it set, each condition the check evaluates reports only its first
violation. `APP_RULES` sets it for `roles` (the missing default image is
reported once) and `ref_uniqueness` (one role_services duplicate at most).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.domain.models import ApplicationDefinition
from core.domain.violations import Violation, ViolationKind
from core.interfaces.catalog import AppCatalog
from core.shared import list_is_unique, string_in_list


@dataclass(frozen=True)
class RuleContext:
    """Inputs shared by every rule check for one validation call."""

    app: ApplicationDefinition
    role_ids: tuple[str, ...]
    service_ids: tuple[str, ...]
    catalog: AppCatalog

    @property
    def valid_role_ids(self) -> str:
        return ",".join(self.role_ids)

    @property
    def valid_service_ids(self) -> str:
        return ",".join(self.service_ids)


RuleFunc = Callable[..., list[Violation]]


@dataclass(frozen=True)
class RuleCheck:
    """A registered rule check.

    `stop_on_first` is handed to the check: with it set, each condition the
    check evaluates reports at most its first violation.
    """

    name: str
    func: RuleFunc
    description: str = ""
    stop_on_first: bool = False

    def __call__(self, ctx: RuleContext) -> list[Violation]:
        return self.func(ctx, stop_on_first=self.stop_on_first)


def check_uniqueness(ctx: RuleContext, *, stop_on_first: bool = False) -> list[Violation]:
    """Declared role IDs and service IDs must each be pairwise distinct.

    Each list yields at most one violation, so `stop_on_first` changes nothing.
    """

    violations: list[Violation] = []
    if not list_is_unique(ctx.role_ids):
        violations.append(Violation(ViolationKind.NON_UNIQUE_ROLE_ID))
    if not list_is_unique(ctx.service_ids):
        violations.append(Violation(ViolationKind.NON_UNIQUE_SERVICE_ID))
    return violations


def check_ref_uniqueness(ctx: RuleContext, *, stop_on_first: bool = True) -> list[Violation]:
    """No duplicates among config references to roles."""

    config = ctx.app.config
    violations: list[Violation] = []
    if not list_is_unique(config.selected_roles):
        violations.append(Violation(ViolationKind.NON_UNIQUE_SELECTED_ROLE))

    seen: set[str] = set()
    for binding in config.role_services:
        if binding.role_id in seen:
            violations.append(Violation(ViolationKind.NON_UNIQUE_SERVICE_ROLE))
            if stop_on_first:
                break
        seen.add(binding.role_id)
    return violations


def check_service_roles(ctx: RuleContext, *, stop_on_first: bool = False) -> list[Violation]:
    """role_services entries must point at declared roles and services."""

    violations: list[Violation] = []
    role_reported = service_reported = False
    for binding in ctx.app.config.role_services:
        if not string_in_list(binding.role_id, ctx.role_ids) and not (stop_on_first and role_reported):
            violations.append(
                Violation(ViolationKind.INVALID_NODE_ROLE_ID, (binding.role_id, ctx.valid_role_ids))
            )
            role_reported = True
        for service_id in binding.service_ids:
            if string_in_list(service_id, ctx.service_ids) or (stop_on_first and service_reported):
                continue
            violations.append(
                Violation(ViolationKind.INVALID_SERVICE_ID, (service_id, ctx.valid_service_ids))
            )
            service_reported = True
    return violations


def check_selected_roles(ctx: RuleContext, *, stop_on_first: bool = False) -> list[Violation]:
    """Every selected role must resolve through the catalog."""

    violations: list[Violation] = []
    for role_id in ctx.app.config.selected_roles:
        if ctx.catalog.get_role(ctx.app, role_id) is None:
            violations.append(
                Violation(ViolationKind.INVALID_SELECTED_ROLE_ID, (role_id, ctx.valid_role_ids))
            )
            if stop_on_first:
                break
    return violations


def check_roles(ctx: RuleContext, *, stop_on_first: bool = True) -> list[Violation]:
    """A role without its own image needs a top-level default image.

    Registered with `stop_on_first`: one message no matter how many roles
    lack an image.
    """

    if ctx.app.spec.has_default_image:
        return []
    violations: list[Violation] = []
    for role in ctx.app.node_roles:
        if not role.has_image:
            violations.append(Violation(ViolationKind.NO_DEFAULT_IMAGE))
            if stop_on_first:
                break
    return violations


def check_services(ctx: RuleContext, *, stop_on_first: bool = False) -> list[Violation]:
    """Dashboard endpoints must declare a url_scheme."""

    violations: list[Violation] = []
    for service in ctx.app.services:
        if service.endpoint.is_dashboard and not service.endpoint.url_scheme:
            violations.append(Violation(ViolationKind.NO_URL_SCHEME, (service.id,)))
            if stop_on_first:
                break
    return violations


# Order here is the order of blocks in the combined rejection message.
APP_RULES: tuple[RuleCheck, ...] = (
    RuleCheck(
        "uniqueness",
        check_uniqueness,
        "Role and service IDs are unique.",
    ),
    RuleCheck(
        "ref_uniqueness",
        check_ref_uniqueness,
        "selected_roles and role_services role IDs are unique.",
        stop_on_first=True,
    ),
    RuleCheck(
        "service_roles",
        check_service_roles,
        "role_services reference declared roles and services.",
    ),
    RuleCheck(
        "selected_roles",
        check_selected_roles,
        "selected_roles resolve to declared roles.",
    ),
    RuleCheck(
        "roles",
        check_roles,
        "Every role has an image, its own or the default.",
        stop_on_first=True,
    ),
    RuleCheck(
        "services",
        check_services,
        "Dashboard services declare a url_scheme.",
    ),
)
