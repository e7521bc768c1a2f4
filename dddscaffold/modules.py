"""Registry of domain modules and their start-up wiring."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable


class _Container(Protocol):
    def get_logger(self, name: str) -> logging.Logger: ...

    def on_start(self, hook: Callable[[], None]) -> None: ...

    def on_stop(self, hook: Callable[[], None]) -> None: ...


@runtime_checkable
class Module(Protocol):
    """A domain module: creates its repositories and services, registers its routes."""

    name: str

    def initialize(self, container: _Container) -> None:
        """Set the module up against the container."""


@runtime_checkable
class LifecycleModule(Module, Protocol):
    """A module that also wants to run when the application starts and stops."""

    def start(self, container: _Container) -> None:
        """Run when the application starts."""

    def stop(self, container: _Container) -> None:
        """Run when the application stops."""


class ModuleRegistry:
    """Domain modules by name, in the order they were registered."""

    def __init__(self) -> None:
        self._modules: dict[str, Module] = {}

    def register(self, module: Module) -> None:
        if module is None:
            raise ValueError("domain: register module is nil")
        name = module.name
        if not name:
            raise ValueError("domain: module name is empty")
        if name in self._modules:
            raise ValueError(f"domain: module already registered: {name}")
        self._modules[name] = module

    def modules(self) -> dict[str, Module]:
        return dict(self._modules)

    def initialize_all(self, container: _Container) -> None:
        """Initialize every module and hook lifecycle modules into the container."""
        logger = container.get_logger("system")

        for name, module in self._modules.items():
            logger.info("Initializing domain module module=%s", name)
            try:
                module.initialize(container)
            except Exception as exc:
                raise RuntimeError(f"failed to initialize module {name}: {exc}") from exc

            if isinstance(module, LifecycleModule):
                start_hook, stop_hook = _lifecycle_hooks(logger, name, module, container)
                container.on_start(start_hook)
                container.on_stop(stop_hook)

        logger.info(
            "all domain modules initialized successfully count=%d", len(self._modules)
        )


def _lifecycle_hooks(
    logger: logging.Logger, name: str, module: LifecycleModule, container: _Container
) -> tuple[Callable[[], None], Callable[[], None]]:
    def start() -> None:
        logger.info("starting domain module module=%s", name)
        module.start(container)

    def stop() -> None:
        logger.info("stopping domain module module=%s", name)
        module.stop(container)

    return start, stop


_global_registry = ModuleRegistry()


def register(module: Module) -> None:
    """Register a module in the process-wide registry."""
    _global_registry.register(module)


def get_modules() -> dict[str, Module]:
    """Return the modules of the process-wide registry."""
    return _global_registry.modules()


def initialize_all(container: _Container) -> None:
    """Initialize every module of the process-wide registry."""
    _global_registry.initialize_all(container)