"""Micro QR Code symbol construction: specification tables, bit streams, masking and module placement."""

__version__ = "4.0.2"

__all__ = ["types", "bitstream", "mqrspec", "mmask", "mask", "framefiller", "encoder"]