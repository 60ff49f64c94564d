"""Parse UDDF dive logs into Python structures with normalized units."""

import logging

from uddf2py.config import get_config
from uddf2py.helpers.normalize import ensure_list, normalize
from uddf2py.helpers.parse_uddf import parse_uddf
from uddf2py.helpers.xml_tree import xml_to_tree
from uddf2py.models.measurement import CATEGORIES, FIELD_CATEGORIES, MeasurementCategory
from uddf2py.services.unit_converter import UnitConverter, convert_leaf, convert_tree
from uddf2py.utils.validators import IMPERIAL, METRIC, SI, UNIT_SYSTEMS

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(level=None):
    """Set the package logger level, defaulting to the configured UDDF_LOG_LEVEL."""
    if level is None:
        level = get_config().log_level
    logging.getLogger(__name__).setLevel(level)


__all__ = [
    "parse_uddf",
    "xml_to_tree",
    "normalize",
    "ensure_list",
    "convert_leaf",
    "convert_tree",
    "configure_logging",
    "UnitConverter",
    "MeasurementCategory",
    "CATEGORIES",
    "FIELD_CATEGORIES",
    "SI",
    "METRIC",
    "IMPERIAL",
    "UNIT_SYSTEMS",
]
