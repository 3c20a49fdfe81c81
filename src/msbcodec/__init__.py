"""
msbcodec - reader and writer for MSB map layout files.

Usage:
    from msbcodec import MSB1

    msb = MSB1.read("m10_00_00_00.msb")
    for part in msb.parts:
        print(part.name, part.model_name)
    msb.write("m10_00_00_00.msb")
"""
from .formats.msb import MSB1, MSBE, MsbFile, MsbFormatError, MissingReferenceError

__version__ = "1.0.0"

__all__ = ['MSB1', 'MSBE', 'MsbFile', 'MsbFormatError', 'MissingReferenceError']
