import importlib
import pkgutil

from fastapi import APIRouter, FastAPI
from loguru import logger


def discover_routers(package_name: str = "app.api") -> list[APIRouter]:
    """Collect the ``router`` of every module in a package, in module name order.

    Subpackages are scanned too. A module without a ``router`` attribute is
    skipped; one that fails to import stops startup.
    """
    package = importlib.import_module(package_name)
    package_path = getattr(package, "__path__", None)
    if not package_path:
        logger.warning(f"Cannot scan {package_name} for routers as it's not a package")
        return []

    routers: list[APIRouter] = []
    for _, module_name, is_pkg in sorted(pkgutil.iter_modules(package_path), key=lambda m: m.name):
        full_module_name = f"{package_name}.{module_name}"
        if is_pkg:
            routers.extend(discover_routers(full_module_name))
            continue

        module = importlib.import_module(full_module_name)
        router = getattr(module, "router", None)
        if isinstance(router, APIRouter):
            routers.append(router)
            logger.debug(f"Discovered router {router.prefix} in {full_module_name}")

    return routers


def register_routers(app: FastAPI, prefix: str = "/api") -> None:
    """Mount every router found under ``app.api`` below ``prefix``."""
    routers = discover_routers()
    for router in routers:
        app.include_router(router, prefix=prefix)
    logger.info(f"Registered {len(routers)} routers under {prefix}")
