import logging

from uddf2py.config import get_config
from uddf2py.helpers.normalize import normalize
from uddf2py.helpers.xml_tree import xml_to_tree
from uddf2py.services.unit_converter import UnitConverter
from uddf2py.utils.validators import validate_unit_system

logger = logging.getLogger(__name__)


def parse_uddf(data, unit=None, label_references=None, app_config=None):
  """Parse a UDDF document and convert every dive into the requested unit system.

  Returns ``{'unit': unit, 'data': tree}`` where ``tree`` keeps the document's
  shape, ``uddf.profiledata.repetitiongroup`` and each group's ``dive`` are
  always lists, and measurement fields inside dives are converted. Values in
  SI units are left as numbers. XML syntax errors propagate from lxml.
  """
  if unit is None or label_references is None:
    app_config = app_config or get_config()
  if label_references is None:
    label_references = app_config.LABEL_REFERENCES

  from_config = unit is None
  if from_config:
    unit = app_config.DEFAULT_UNIT

  is_valid, message = validate_unit_system(unit)
  if not is_valid:
    raise ValueError(f"UDDF_DEFAULT_UNIT is invalid: {message}" if from_config else message)

  results = normalize(xml_to_tree(data))

  document = results.get('uddf')
  profiledata = document.get('profiledata') if isinstance(document, dict) else None
  if isinstance(profiledata, dict):
    for group in profiledata['repetitiongroup']:
      if isinstance(group, dict):
        group['dive'] = [
          UnitConverter.convert_tree(dive, unit, label_references=label_references)
          for dive in group['dive']
        ]

  logger.debug("Parsed UDDF document into %s units", unit)
  return {'unit': unit, 'data': results}
