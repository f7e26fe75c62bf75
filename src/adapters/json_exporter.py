"""Exportación JSON de la respuesta de admisión.

Por qué JSON:
- Es el formato del sobre AdmissionReview; la salida se puede devolver tal cual
  al servidor de API o guardar como evidencia.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.admission import AdmissionReview


def render_review_json(review: AdmissionReview) -> str:
    """Render a review as UTF-8 JSON with stable formatting."""

    return json.dumps(review.to_wire(), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_review_json(*, review: AdmissionReview, output_path: Path) -> Path:
    """Exporta el `AdmissionReview` de respuesta a un fichero JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_review_json(review), encoding="utf-8")
    return output_path
