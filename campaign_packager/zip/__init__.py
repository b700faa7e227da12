"""ZIP container writer."""

from .builder import ZipBuilder, ZipBuildError, build_zip
from .crc32 import crc32

__all__ = ["ZipBuilder", "ZipBuildError", "build_zip", "crc32"]
