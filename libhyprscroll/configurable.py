import copy
import os

from libhyprscroll.log_utils import logger
from libhyprscroll.utils import as_flag


class Configurable:
    """Attribute lookup backed by declared defaults

    Subclasses call ``add_defaults`` with ``(name, value, doc)`` tuples.
    Lookups resolve, in order: keyword config given to ``__init__``, the
    environment variable mapped to the name in ``env_defaults``, then the
    declared default. Environment values are coerced to the type of the
    declared default; boolean defaults accept 0/1 and true/false.
    """

    env_defaults = {}  # type: dict[str, str]

    def __init__(self, **config):
        self._variable_defaults = {}
        self._user_config = config

    def add_defaults(self, defaults):
        """Add defaults to this object, overwriting any which already exist"""
        # Shallow copy so a mutable default is never shared between instances
        self._variable_defaults.update((d[0], copy.copy(d[1])) for d in defaults)

    def __getattr__(self, name):
        if name in ("_variable_defaults", "_user_config"):
            raise AttributeError(name)
        found, value = self._find_default(name)
        if found:
            setattr(self, name, value)
            return value
        else:
            cname = self.__class__.__name__
            raise AttributeError(f"{cname} has no attribute: {name}")

    def _find_default(self, name):
        """Returns a tuple (found, value)"""
        if name in self._user_config:
            return (True, self._user_config[name])
        if name not in self._variable_defaults:
            return (False, None)

        default = self._variable_defaults[name]
        var = self.env_defaults.get(name)
        raw = os.environ.get(var) if var else None
        if raw is None:
            return (True, default)
        if isinstance(default, bool):
            return (True, as_flag(raw))
        try:
            return (True, type(default)(raw.strip()))
        except ValueError:
            logger.warning("Ignoring %s=%r: expected %s", var, raw, type(default).__name__)
            return (True, default)
