"""AES-128 block cipher with ECB and CBC modes, bit padding, and MCT/MMT tests."""

__version__ = "0.1.0"
__all__ = ["aes", "hexbytes", "mct", "modes", "schedule"]