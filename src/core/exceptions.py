"""Excepciones del Core.

Por qué pocas:
- Las reglas de validación nunca lanzan; devuelven violaciones.
- Solo el decodificado del payload puede fallar de forma "fatal" para una llamada.
"""

from __future__ import annotations


class AppGateError(Exception):
    """Base exception for admission-gate errors."""


class DecodeError(AppGateError):
    """Raised when a payload cannot be decoded into a typed document.

    `str(exc)` is the underlying decoder message, reported verbatim to the
    caller of the gate.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
