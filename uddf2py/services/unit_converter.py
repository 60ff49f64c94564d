from typing import Any, Dict, List, Optional, Union

from uddf2py.helpers.xml_tree import TEXT_KEY
from uddf2py.models.measurement import category_for
from uddf2py.utils.validators import SI, is_numeric_string

Scalar = Union[str, int, float]
Node = Union[Scalar, List[Any], Dict[str, Any]]

# field name -> (attribute, label format) for reference-style elements
REFERENCE_LABELS = {
    "divemode": ("type", "Type: {}"),
    "switchmix": ("ref", "Ref: {}"),
}


class UnitConverter:
    """Service that rewrites UDDF measurement values into a unit system"""

    @staticmethod
    def coerce_number(value):
        """Turn numeric XML text into a float, leave everything else alone."""
        if is_numeric_string(value):
            return float(value)
        return value

    @staticmethod
    def convert_leaf(field_name, value, unit=SI):
        """Convert a single scalar according to the category of its field name"""

        # Containers are handled by convert_tree
        if isinstance(value, (dict, list)):
            return value

        value = UnitConverter.coerce_number(value)

        category = category_for(field_name)
        if category is None:
            return value

        return category.convert(value, unit)

    @staticmethod
    def label_reference(field_name, value):
        """Collapse <divemode type=".."/> and <switchmix ref=".."/> into a label."""
        if not isinstance(value, dict) or not isinstance(field_name, str):
            return value

        label = REFERENCE_LABELS.get(field_name.lower())
        if label is None:
            return value

        attribute, template = label
        if value.get(attribute):
            return template.format(value[attribute])
        return value

    @staticmethod
    def convert_tree(node, unit=SI, field_name=None, label_references=False):
        """Rebuild a tree depth-first, converting every scalar by the field that owns it"""

        if isinstance(node, list):
            # Repeated elements share the owning element's field name
            return [
                UnitConverter.convert_tree(item, unit, field_name, label_references)
                for item in node
            ]

        if isinstance(node, dict):
            converted = {}
            for key, child in node.items():
                child_field = field_name if key == TEXT_KEY else key
                # Scalars are converted once, by the recursive call
                value = UnitConverter.convert_tree(child, unit, child_field, label_references)
                if label_references:
                    value = UnitConverter.label_reference(child_field, value)
                converted[key] = value
            return converted

        if field_name is None:
            return node

        return UnitConverter.convert_leaf(field_name, node, unit)


def convert_leaf(field_name: str, value: Node, unit: str = SI) -> Node:
    return UnitConverter.convert_leaf(field_name, value, unit)


def convert_tree(
    node: Node,
    unit: str = SI,
    field_name: Optional[str] = None,
    label_references: bool = False,
) -> Node:
    return UnitConverter.convert_tree(node, unit, field_name, label_references)
