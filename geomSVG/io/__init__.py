"""
Input/output of export settings and scene descriptions (JSON).
"""

from .config import (
    ExportConfig,
    SUPPORTED_UNITS,
    default_styles,
    config_from_dict,
    load_config,
    shape_from_dict,
    load_scene,
)
