from .block_instance import BlockInstance

__all__ = ["BlockInstance"]
