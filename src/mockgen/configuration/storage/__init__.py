"""Storage configurations for mockgen."""

from mockgen.configuration.storage.local import LocalStorage

__all__ = ["LocalStorage"]
