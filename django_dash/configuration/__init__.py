from .configuration import BaseConfiguration, Configuration

__all__ = ["BaseConfiguration", "Configuration"]
