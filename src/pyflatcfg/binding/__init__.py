# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 19:38:12
# @Author : Kariko Lin

from .fields import BoundField, bound_fields, cfg_field
from .encode import marshal, marshal_to_config
from .decode import unmarshal, unmarshal_from_config
