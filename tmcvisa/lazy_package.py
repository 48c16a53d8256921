# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Module type deferring the import of the public API to its first use.

Importing tmcvisa should not pull in pyusb, python-usbtmc and pyvisa, so that
the version can be read before the dependencies are installed.

"""
import sys
from importlib import import_module
from types import ModuleType
from typing import Any, Dict, List

from .errors import TmcVisaLazyImportFailed

_MODULE_OWNED = ('__name__', '__doc__', '__package__', '__builtins__')


class LazyPackage(ModuleType):
    """A module resolving its public names on first access.

    Parameters
    ----------
    lazy_imports : dict
        Mapping between the public names and their location given as
        module.name relative to the package.

    name : str
        Name of the module to replace, typically __name__.

    doc : str
        Docstring of the module to replace, typically __doc__.

    local_vars : dict
        Names already defined in the replaced module, typically locals().

    Notes
    -----

    Used at the very end of an __init__.py::

        sys.modules[__name__] = LazyPackage(lazy_imports, __name__, __doc__,
                                            locals())

    """
    def __init__(self, lazy_imports: Dict[str, str], name: str, doc: str,
                 local_vars: dict) -> None:

        super().__init__(name, doc)
        self.__package__ = sys.modules[name].__package__
        self._lazy_imports = lazy_imports
        self._local_vars = {}
        for key, val in local_vars.items():
            if key in _MODULE_OWNED:
                continue
            if key.startswith('__'):
                # Keep __path__, __file__, __spec__, __version__ reachable
                # for the import machinery and introspection.
                setattr(self, key, val)
            else:
                self._local_vars[key] = val

        self.__all__: List[str] = sorted(lazy_imports)

    def __getattr__(self, attr_name: str) -> Any:
        """Import the object the first time it is accessed.

        """
        if attr_name in self._lazy_imports:
            mod, attr = self._lazy_imports[attr_name].rsplit('.', 1)
            mod = mod if mod.startswith('.') else '.' + mod
            try:
                mod_obj = import_module(mod, self.__package__)
            except Exception as e:
                msg = f'Failed to import {mod} from {self.__package__}'
                raise TmcVisaLazyImportFailed(msg) from e
            value = getattr(mod_obj, attr)
            setattr(self, attr_name, value)
            return value

        if attr_name in self._local_vars:
            return self._local_vars[attr_name]

        msg = f"module '{self.__name__}' has no attribute '{attr_name}'"
        raise AttributeError(msg)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.__all__))
