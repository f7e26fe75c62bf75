"""Core del gate de admisión: dominio, contratos, reglas y configuración."""
