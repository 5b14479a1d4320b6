"""pyutils

Small, stateless helpers familiar from scripting languages: strict parsing,
integer ranges, sequence and string utilities, and thin console and file
shims.

Helpers live in single-purpose modules (``parsing``, ``ranges``,
``sequences``, ``strings``, ``mappings``, ``console``, ``files``). Several of
them reuse builtin names such as ``map`` or ``print``, so nothing is
re-exported here; import from the defining module instead.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
