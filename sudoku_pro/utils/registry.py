import importlib
import traceback
from typing import Any, Dict, Optional, Type

from sudoku_pro.utils.log import get_logger


class Registry(object):
    """A name -> class registry for pluggable components."""

    def __init__(self, name: str, default_mapping: Optional[Dict[str, str]] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`dict`): Default mapping from names to dotted class paths,
                imported lazily on first lookup.
        """
        self._name = name
        self._modules: Dict[str, Type] = {}
        self._default_mapping = dict(default_mapping or {})
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        return self._modules

    def list_names(self):
        """Names that can be passed to `get`, registered or lazily importable."""
        return sorted(set(self._modules) | set(self._default_mapping))

    def get(self, module_key: Optional[str]) -> Any:
        """
        Look up a class by name.

        The key may be a registered name, a name from the default mapping or a
        dotted path such as ``"my_package.my_module.MyCarver"``.

        Args:
            module_key (`str`): name of the class to look up

        Returns:
            `Any`: the class object, or None for an empty key

        Raises:
            `ValueError`: if the key is unknown.
            `ImportError`: if a lazily mapped class cannot be imported.
        """
        module = self._modules.get(module_key, None)
        if module is not None:
            return module
        if module_key is None:
            self.logger.info("Empty module key, return None")
            return None
        if module_key in self._default_mapping:
            module_path = self._default_mapping[module_key]
        elif isinstance(module_key, str) and "." in module_key:
            module_path = module_key
        else:
            raise ValueError(f"Invalid module key for {self._name}: {module_key}")

        module_path, class_name = module_path.rsplit(".", 1)
        try:
            module = self._dynamic_import(module_path, class_name)
        except Exception:
            self.logger.error(
                f"Failed to dynamically import {class_name} from {module_path}:\n"
                + traceback.format_exc()
            )
            raise ImportError(f"Cannot dynamically import {class_name} from {module_path}")
        self._register_module(module_name=module_key, module_cls=module, force=True)
        return module

    def _register_module(self, module_name=None, module_cls=None, force=False):
        if module_name is None:
            module_name = module_cls.__name__

        if module_name in self._modules and not force:
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_cls
        module_cls._name = module_name

    def register_module(self, module_name: str, module_cls: Type = None, force=False):
        """
        Register a class under `module_name`, directly or as a decorator.

        Example:

            .. code-block:: python

                @CARVERS.register_module("symmetric")
                class SymmetricCarver(Carver):
                    pass
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register

    def _dynamic_import(self, module_path: str, class_name: str) -> Type:
        module = importlib.import_module(module_path)
        return getattr(module, class_name)
