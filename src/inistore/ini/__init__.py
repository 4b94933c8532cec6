# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:58:11

from .codec import (
    ConversionError,
    ValueCodec,
    codec_for,
    register_codec
)
from .model import IniSection, IniClass
from .parser import IniFormatError, IniParser
from .snapshot import IniJsonParser, IniYamlParser
from .store import IniFileError, IniStore
