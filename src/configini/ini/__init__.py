# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/09/21 22:30:40
# @Author : Kariko Lin

from .settings import IniSettings
from .model import KeyValue, IniSection, IniDocument
from .config import IniConfig, ReadResult
from .parser import IniParser
