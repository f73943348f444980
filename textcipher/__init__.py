"""textcipher — cifrado de texto por corrimiento (shift / unicode)."""
from .args import Config, parse_args
from .codec import transform

__all__ = ["Config", "parse_args", "transform"]
__version__ = "1.0.0"
