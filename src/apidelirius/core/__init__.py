"""Núcleo: configuración, errores y formas de respuesta.

Nada aquí hace I/O; las operaciones HTTP viven en `apidelirius.adapters`.
"""
