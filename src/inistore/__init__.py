# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:01:52

import logging

from .ini import (
    ConversionError,
    IniClass,
    IniFileError,
    IniFormatError,
    IniJsonParser,
    IniParser,
    IniSection,
    IniStore,
    IniYamlParser,
    ValueCodec,
    codec_for,
    register_codec
)

__all__ = [
    'IniStore', 'IniClass', 'IniSection',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'IniFormatError', 'IniFileError', 'ConversionError',
    'ValueCodec', 'codec_for', 'register_codec'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
