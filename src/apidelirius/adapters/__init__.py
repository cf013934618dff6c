"""Adaptadores de I/O: cliente httpx, tabla de endpoints y operaciones."""
