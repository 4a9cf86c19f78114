from .local_json_storage import LocalJsonStorage

__all__ = [
    "LocalJsonStorage",
]
