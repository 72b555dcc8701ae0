"""Handler import resolution — resolves ``"module:attribute"`` strings.

Used by ``urlshort serve --fallback`` to locate the fallback handler.
"""

import importlib
from typing import Any


def resolve_handler(import_string: str) -> Any:
    """Resolve an import string to a callable handler.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"handler"`` (e.g. ``"myapp"`` resolves
    to ``myapp.handler``).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not callable.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "handler"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if not callable(obj):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, which is not callable"
        raise TypeError(msg)

    return obj
