"""
JSON backend - canonical structural dump of the DesignConfig.
"""

import json

from designkit.domain.entities import DesignConfig


def render(config: DesignConfig) -> str:
    return json.dumps(config.to_wire(), indent=2, ensure_ascii=False)
