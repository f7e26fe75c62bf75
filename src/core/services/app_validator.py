"""Application-definition admission: decode, run every rule, compose the verdict.

The flow is a single stage:

    payload -> decode_app -> APP_RULES (all of them) -> ValidationOutcome

A payload that does not decode is rejected with the decoder's message and no
rule runs. Otherwise every rule runs regardless of the others' results, and
the non-empty rule blocks are joined in `APP_RULES` order so a caller can fix
every problem in one pass.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from pydantic import ValidationError

from adapters.catalog import DocumentCatalog
from core.config import GateSettings
from core.domain.admission import AdmissionRequest, AdmissionResponse, Status
from core.domain.models import ApplicationDefinition
from core.domain.violations import Violation
from core.exceptions import DecodeError
from core.interfaces.catalog import AppCatalog
from core.services.rules import APP_RULES, RuleCheck, RuleContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleReport:
    """Violations produced by one rule check."""

    rule: str
    violations: tuple[Violation, ...]

    def block(self) -> str:
        return "\n".join(v.render() for v in self.violations)


@dataclass(frozen=True)
class ValidationOutcome:
    """Accept/reject verdict for one document."""

    allowed: bool
    reports: tuple[RuleReport, ...] = field(default_factory=tuple)
    decode_error: str | None = None

    @staticmethod
    def accepted() -> ValidationOutcome:
        return ValidationOutcome(allowed=True)

    @staticmethod
    def rejected(reports: tuple[RuleReport, ...]) -> ValidationOutcome:
        return ValidationOutcome(allowed=False, reports=reports)

    @staticmethod
    def decode_failure(error: str) -> ValidationOutcome:
        return ValidationOutcome(allowed=False, decode_error=error)

    @property
    def violations(self) -> list[Violation]:
        return [v for report in self.reports for v in report.violations]

    @property
    def message(self) -> str:
        """Combined message, prefixed with a newline when rejected."""

        if self.allowed:
            return ""
        if self.decode_error is not None:
            return "\n" + self.decode_error
        return "\n" + "\n".join(report.block() for report in self.reports)


def decode_app(raw: bytes | str) -> ApplicationDefinition:
    """Decode a JSON payload into an `ApplicationDefinition`.

    Raises `DecodeError` for malformed JSON and for structurally incompatible
    documents alike. Validation is strict: JSON values must already have the
    field's type (`"false"` is not a bool, `"22"` is not a port).
    """

    try:
        return ApplicationDefinition.model_validate_json(raw, strict=True)
    except ValidationError as exc:
        raise DecodeError(str(exc)) from exc


class AppValidator:
    """Runs the application rule set against decoded documents.

    Stateless between calls: the catalog and settings are read-only, and each
    call builds its own `RuleContext`.
    """

    def __init__(
        self,
        catalog: AppCatalog | None = None,
        settings: GateSettings | None = None,
        *,
        rules: tuple[RuleCheck, ...] = APP_RULES,
    ) -> None:
        self.catalog = catalog or DocumentCatalog()
        self.settings = settings or GateSettings()
        self.rules = rules

    def build_context(self, app: ApplicationDefinition) -> RuleContext:
        return RuleContext(
            app=app,
            role_ids=tuple(self.catalog.all_role_ids(app)),
            service_ids=tuple(self.catalog.all_service_ids(app)),
            catalog=self.catalog,
        )

    def _run_rules(self, ctx: RuleContext) -> list[list[Violation]]:
        if self.settings.parallel_checks and len(self.rules) > 1:
            workers = min(self.settings.max_workers, len(self.rules))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # map() yields in submission order.
                return list(pool.map(lambda rule: rule(ctx), self.rules))
        return [rule(ctx) for rule in self.rules]

    def evaluate(self, app: ApplicationDefinition) -> ValidationOutcome:
        ctx = self.build_context(app)
        results = self._run_rules(ctx)

        reports = tuple(
            RuleReport(rule=rule.name, violations=tuple(violations))
            for rule, violations in zip(self.rules, results)
            if violations
        )
        if not reports:
            logger.debug("Application %s accepted", app.metadata.name or "<unnamed>")
            return ValidationOutcome.accepted()

        logger.info(
            "Application %s rejected: %d violation(s) in %s",
            app.metadata.name or "<unnamed>",
            sum(len(r.violations) for r in reports),
            ", ".join(r.rule for r in reports),
        )
        return ValidationOutcome.rejected(reports)

    def validate_payload(self, raw: bytes | str) -> ValidationOutcome:
        try:
            app = decode_app(raw)
        except DecodeError as exc:
            logger.info("Application payload rejected: decode failed")
            return ValidationOutcome.decode_failure(str(exc))
        return self.evaluate(app)


def build_response(uid: str, outcome: ValidationOutcome) -> AdmissionResponse:
    if outcome.allowed:
        return AdmissionResponse(uid=uid, allowed=True)
    return AdmissionResponse(uid=uid, allowed=False, result=Status(message=outcome.message))


def admit_app_cr(
    request: AdmissionRequest,
    handler_state: object | None = None,
    *,
    validator: AppValidator | None = None,
) -> AdmissionResponse:
    """Top-level admission function for application definitions.

    `handler_state` is the hosting handler's cluster context. No rule needs it
    today; it is accepted so every admit function shares one signature.
    """

    validator = validator or AppValidator()
    outcome = validator.validate_payload(request.raw_object())
    return build_response(request.uid, outcome)
