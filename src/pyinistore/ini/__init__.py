# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:51:10

from .errors import (
    ConfigParseError,
    IniError,
    IniParseError,
    IniValueError,
    InvalidNameError,
    KeyNotFoundError,
    NotLoadedError,
)
from .model import IniDocument, IniEntry, IniSection, merge_documents
from .parser import IniParser
from .access import IniAccessor
from .file import IniFile
from .snapshot import IniYamlHandler
