"""dap-typegen -- TypeScript declarations from the Debug Adapter Protocol schema.

The generator reads the protocol's JSON-schema definition table and emits
one self-contained ``.d.ts`` file: an aggregate ``Api`` interface for every
event and request, a stub interface for each payload, and every plain data
type those reference.

Public API::

    from dap_typegen import GeneratorConfig, generate_declarations
    from dap_typegen.schema import load_schema_store
"""

from dap_typegen.codegen.engine import GenerationResult, TypeGenerator, generate_declarations
from dap_typegen.config import GeneratorConfig

__all__ = ["GenerationResult", "GeneratorConfig", "TypeGenerator", "generate_declarations"]
__version__ = "0.1.0"
