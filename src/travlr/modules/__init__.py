"""Feature modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every feature package and return the routers they define.

    A subpackage of ``travlr.modules`` contributes routes by exposing a
    ``router`` attribute in its ``__init__.py``. Packages without one
    (such as ``users``) still get imported so their models register on
    the shared metadata.

    Returns:
        List of FastAPI routers from discovered modules.
    """
    modules_dir = Path(__file__).parent
    routers: list[APIRouter] = []

    for path in sorted(modules_dir.iterdir()):
        if path.is_dir() and not path.name.startswith("_"):
            module = import_module(f"travlr.modules.{path.name}")
            if (path / "models.py").exists():
                import_module(f"travlr.modules.{path.name}.models")
            if hasattr(module, "router"):
                routers.append(module.router)
                logger.debug("module_loaded", module=path.name)

    return routers
