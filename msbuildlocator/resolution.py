"""
Module resolution redirection for registered MSBuild instances.

A ResolutionRegistry answers "where does reserved module X come from?" once it
has been armed with an instance's MSBuild directory. Names outside the reserved
set are always declined, as are reserved names whose module file is missing
under every armed root. Declining returns None so other resolution strategies
can proceed; only a broken module file raises (the loader's own error).

Usage:
    registry = ResolutionRegistry()
    registry.arm(instance.msbuild_path)
    module = registry.resolve("Microsoft.Build")

    # Optionally make reserved top-level names importable
    registry.install()
"""

import enum
import importlib.abc
import importlib.util
import logging
import sys
from importlib.machinery import ModuleSpec
from pathlib import Path
from types import ModuleType
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .core.config import MSBUILD_MODULE_NAMES
from .core.exceptions import ArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MODULE_SUFFIX = ".py"

ModuleLoader = Callable[[str, Path], ModuleType]


class ArmMode(enum.Enum):
    """
    What arming an already-armed registry does.

    ADD stacks another root behind the existing ones; roots are tried in the
    order they were armed. REPLACE drops all existing roots first.
    """

    ADD = "add"
    REPLACE = "replace"


def load_module_from_path(name: str, path: Path) -> ModuleType:
    """
    Load a module file with importlib.

    The module is entered in sys.modules under ``name`` before it executes, so
    code that looks itself up by name (dataclasses, pickling) works. A failed
    load removes the entry again.

    Args:
        name: Module name to give the loaded module
        path: Module file

    Returns:
        Executed module object

    Raises:
        ImportError: If importlib has no loader for the file type
        Exception: Whatever executing the module raises (e.g. SyntaxError)
    """
    spec = importlib.util.spec_from_file_location(name, str(path))
    if spec is None or spec.loader is None:
        raise ImportError(f"No loader available for {path}", name=name, path=str(path))

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


class ResolutionRegistry:
    """
    Redirects a reserved set of module names to armed MSBuild directories.

    The registry starts Unarmed. arm() moves it to Armed; there is no way
    back. The module file for a reserved name ``N`` is ``<root>/N<suffix>``.
    Name matching is case-insensitive, the file name keeps the requested
    spelling.
    """

    def __init__(
        self,
        module_names: Sequence[str] = MSBUILD_MODULE_NAMES,
        suffix: str = DEFAULT_MODULE_SUFFIX,
        loader: ModuleLoader = load_module_from_path,
    ):
        """
        Initialize registry.

        Args:
            module_names: Reserved module names
            suffix: Module file extension, including the dot
            loader: Function that loads a module file
        """
        self._module_names = {name.lower(): name for name in module_names}
        self.suffix = suffix
        self.loader = loader
        self._roots: List[Path] = []
        self._finder: Optional["RedirectingFinder"] = None

    @property
    def module_names(self) -> Tuple[str, ...]:
        """Reserved module names in their configured spelling."""
        return tuple(self._module_names.values())

    @property
    def is_armed(self) -> bool:
        return bool(self._roots)

    @property
    def roots(self) -> Tuple[Path, ...]:
        """Armed roots, in resolution order."""
        return tuple(self._roots)

    def arm(self, root_path: Union[str, Path], mode: ArmMode = ArmMode.ADD) -> None:
        """
        Arm the registry with an MSBuild directory.

        Args:
            root_path: Directory holding the reserved module files
            mode: ADD to stack behind existing roots, REPLACE to drop them

        Raises:
            ArgumentError: If root_path is None or empty
        """
        if root_path is None or not str(root_path):
            raise ArgumentError("root_path")

        root = Path(root_path)
        if mode is ArmMode.REPLACE:
            if self._roots:
                logger.info(f"Replacing {len(self._roots)} resolution root(s) with {root}")
            self._roots = [root]
        else:
            if self._roots:
                logger.warning(
                    f"Registry already armed with {self._roots[0]}; "
                    f"stacking {root} behind {len(self._roots)} existing root(s)"
                )
            self._roots.append(root)

        logger.info(f"Module resolution redirected to {root}")

    def is_reserved(self, name: str) -> bool:
        """True if ``name`` is one of the reserved module names."""
        return bool(name) and name.lower() in self._module_names

    def locate(self, name: str) -> Optional[Path]:
        """
        Find the module file for a reserved name.

        Args:
            name: Requested module name

        Returns:
            Path to the module file in the first armed root that has it, or
            None if the name is not reserved or no root has the file
        """
        if not self.is_reserved(name):
            return None

        for root in self._roots:
            candidate = root / f"{name}{self.suffix}"
            if candidate.is_file():
                return candidate

        logger.debug(f"{name}{self.suffix} not found under {len(self._roots)} root(s)")
        return None

    def find_spec(self, name: str) -> Optional[ModuleSpec]:
        """
        Build an import spec for a reserved name.

        Returns:
            ModuleSpec for the located file, or None if declined
        """
        path = self.locate(name)
        if path is None:
            return None
        return importlib.util.spec_from_file_location(name, str(path))

    def resolve(self, name: str) -> Optional[ModuleType]:
        """
        Resolve and load a reserved module.

        Args:
            name: Requested module name

        Returns:
            Loaded module, or None if declined

        Raises:
            Exception: Loader errors for a module file that exists but
                cannot be loaded are propagated unchanged
        """
        path = self.locate(name)
        if path is None:
            return None

        logger.debug(f"Resolving {name} from {path}")
        return self.loader(name, path)

    def install(self, meta_path: Optional[list] = None) -> "RedirectingFinder":
        """
        Insert a finder for this registry at the front of ``sys.meta_path``.

        Installing more than once is a no-op.

        Args:
            meta_path: Finder list to install into (defaults to sys.meta_path)

        Returns:
            The installed finder
        """
        if meta_path is None:
            meta_path = sys.meta_path

        if self._finder is None:
            self._finder = RedirectingFinder(self)

        if self._finder not in meta_path:
            meta_path.insert(0, self._finder)
            logger.debug("Installed redirecting finder into meta path")

        return self._finder


class RedirectingFinder(importlib.abc.MetaPathFinder):
    """Meta path finder that delegates reserved names to a ResolutionRegistry."""

    def __init__(self, registry: ResolutionRegistry):
        self.registry = registry

    def find_spec(self, fullname, path=None, target=None):
        return self.registry.find_spec(fullname)


__all__ = [
    "ArmMode",
    "ResolutionRegistry",
    "RedirectingFinder",
    "load_module_from_path",
]
