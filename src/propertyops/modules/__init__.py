"""Resource modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()

MODULES_DIR = Path(__file__).parent


def _module_names() -> list[str]:
    return sorted(
        path.name
        for path in MODULES_DIR.iterdir()
        if path.is_dir() and not path.name.startswith("_")
    )


def discover_modules() -> list[APIRouter]:
    """Auto-discover and return routers from all modules.

    This function scans the modules directory for subdirectories
    that expose a ``router`` attribute in their __init__.py.

    Returns:
        List of FastAPI routers from discovered modules.
    """
    routers: list[APIRouter] = []

    for name in _module_names():
        module = import_module(f"propertyops.modules.{name}")
        if hasattr(module, "router"):
            routers.append(module.router)
            info = getattr(module, "__module_info__", {})
            logger.debug(
                "module_loaded",
                module=info.get("name", name),
                version=info.get("version"),
                description=info.get("description"),
            )

    return routers


def load_models() -> None:
    """Import every module's models so Base.metadata is complete."""
    for name in _module_names():
        import_module(f"propertyops.modules.{name}.models")
