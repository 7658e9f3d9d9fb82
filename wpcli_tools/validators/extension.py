"""Checks that optional runtime packages are importable."""

from __future__ import annotations

import importlib.util
import logging
from typing import Optional

from ..exceptions import ExtensionError

LOGGER = logging.getLogger("wpcli_tools.validators")


def module_available(module: str) -> bool:
    """Return ``True`` if ``module`` can be imported.

    A dotted name whose parent package is missing and an empty name both
    count as not available.
    """

    try:
        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError) as exc:
        LOGGER.debug("Cannot look up module %r: %s", module, exc)
        return False


class ExtensionValidator:
    """Fluent checks on importable modules."""

    @classmethod
    def validate(cls) -> "ExtensionValidator":
        return cls()

    def must_be_loaded(self, module: str, package: Optional[str] = None) -> "ExtensionValidator":
        """Require ``module`` to be importable; ``package`` is the distribution to install."""

        if not module_available(module):
            LOGGER.debug("Module %s is not importable", module)
            raise ExtensionError.not_available(module, package)
        return self

    def must_be_pillow(self) -> "ExtensionValidator":
        return self.must_be_loaded("PIL", "Pillow")


__all__ = ["ExtensionValidator", "module_available"]
