"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el documento de aplicación, el sobre de admisión y las
  violaciones de reglas (Pydantic v2 + dataclasses inmutables).
- El dominio no conoce transporte ni CLI: solo conceptos del gate.
"""
