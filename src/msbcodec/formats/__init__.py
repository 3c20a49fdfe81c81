"""msbcodec formats package - file format parsers."""
from .msb import MSB1, MSBE, MsbFile, MsbFormatError, MissingReferenceError

__all__ = ['MSB1', 'MSBE', 'MsbFile', 'MsbFormatError', 'MissingReferenceError']
