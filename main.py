"""Entry point de desarrollo de appcr-gate (sin `pip install -e .`).

Permite ejecutar la CLI desde la raíz del repo con:
- `python -m main validate app.json`
- `python -m main review review.json -o response.json`

Motivo:
- Los paquetes `core`, `adapters` y `cli` viven en `src/`; sin instalar el
  proyecto, este shim añade `src/` al `sys.path` antes de cargar la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
