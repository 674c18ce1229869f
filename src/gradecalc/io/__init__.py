"""Reading grades pages and exporting assignments."""

from . import page
from . import export

__all__ = ["page", "export"]
