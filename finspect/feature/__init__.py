from .matcher import NamePattern
from .model import Feature
from .visibility import Visibility

__all__ = ["Feature", "NamePattern", "Visibility"]
