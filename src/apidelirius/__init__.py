"""Cliente async para la API Delirius.

Uso:

    import asyncio
    from apidelirius import genius_search

    songs = asyncio.run(genius_search("Taylor Swift Love Story"))
"""

from apidelirius.adapters.delirius import *  # noqa: F403
from apidelirius.adapters.delirius import __all__ as _operations
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.errors import DeliriusError

__version__ = "0.1.0"

__all__ = [*_operations, "DeliriusError", "DeliriusSettings", "__version__"]
