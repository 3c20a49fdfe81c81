"""Shared helpers for msbcodec."""
from .binary import IoBuffer, ByteOrder, BinaryFormatError

__all__ = ['IoBuffer', 'ByteOrder', 'BinaryFormatError']
