"""Config loading for hsscaffold."""

from hsscaffold.core.config.loader import default_config, load_config, write_config

__all__ = ["default_config", "load_config", "write_config"]
