"""Servicios del Core: reglas de validación y despacho de admisión."""
