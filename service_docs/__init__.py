"""Service descriptor and documentation generation for JSON-RPC services."""

from service_docs.docs import ProcedureSet, param, result

__version__ = "0.1.0"

__all__ = ["ProcedureSet", "param", "result", "__version__"]
