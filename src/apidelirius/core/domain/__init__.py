"""Formas de respuesta de la API.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo el contrato JSON de cada endpoint.
"""
