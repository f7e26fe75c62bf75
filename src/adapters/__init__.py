"""Adaptadores concretos de los contratos del Core."""
