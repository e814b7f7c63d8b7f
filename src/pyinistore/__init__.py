# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:47:33

import logging

from .fsattr import FileAttributes, StatFileAttributes
from .ini import (
    ConfigParseError,
    IniAccessor,
    IniDocument,
    IniEntry,
    IniError,
    IniFile,
    IniParseError,
    IniParser,
    IniSection,
    IniValueError,
    IniYamlHandler,
    InvalidNameError,
    KeyNotFoundError,
    NotLoadedError,
    merge_documents,
)

__all__ = [
    'IniDocument', 'IniSection', 'IniEntry', 'merge_documents',
    'IniParser', 'IniYamlHandler', 'IniAccessor', 'IniFile',
    'FileAttributes', 'StatFileAttributes',
    'IniError', 'IniParseError', 'ConfigParseError', 'KeyNotFoundError',
    'NotLoadedError', 'IniValueError', 'InvalidNameError',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
