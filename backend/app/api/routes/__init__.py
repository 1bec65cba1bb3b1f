from . import weather

__all__ = ["weather"]
