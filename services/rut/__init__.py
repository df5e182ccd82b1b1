"""
Chilean RUT toolkit

Validation, check digit calculation and formatting for Chilean national
identifiers (RUT / RUN), with:
- Módulo 11 check character calculation
- Conversion between dotted, dashed and bare representations
- Pydantic settings for configuration
- Structured logging with structlog
- CLI interface
"""

__version__ = "0.1.0"

from .helpers import *  # noqa: F401,F403
from .helpers import __all__ as _helpers_all

__all__ = ["__version__", *_helpers_all]
