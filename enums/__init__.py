from .seek_origin import SeekOrigin

__all__ = [
    'SeekOrigin'
]
