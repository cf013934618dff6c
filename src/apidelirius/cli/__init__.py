"""CLI de desarrollo (Typer + Rich) sobre las operaciones del cliente."""
