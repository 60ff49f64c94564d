"""
Measurement taxonomy for UDDF fields.

UDDF stores every physical quantity in SI base units. Each category below
names the quantity, the SI unit it arrives in, the lower-case field names
that carry it, and the formula used for the metric and imperial systems.
A formula of ``None`` means the SI value is already the value shown in that
system (metres stay metres under metric, for example).
"""

import math
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Union

from uddf2py.utils.validators import IMPERIAL, METRIC, SI

Number = Union[int, float]
Converted = Union[int, float, str]


def round_half_up(value: float, digits: int = 0) -> Number:
    """Round halves towards positive infinity; integer results come back as int."""
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def kelvin_to_celsius(value):
    return value - 273.15


def kelvin_to_fahrenheit(value):
    return round_half_up((value - 273.15) * 9 / 5 + 32)


def cubic_meters_to_liters(value):
    return round_half_up(value * 1000)


def cubic_meters_to_cubic_feet(value):
    # Cubic feet to 3 decimals: round(value * 35.3147 * 1000) / 1000
    return round_half_up(value * 35.3147, 3)


def meters_to_feet(value):
    return round_half_up(value * 3.28084)


def pascal_to_bar(value):
    return round_half_up(value / 100000)


def pascal_to_psi(value):
    return round_half_up(value * 0.0001450377)


def seconds_to_minutes(value) -> Converted:
    """Whole minutes, or ``"0:SS"`` for anything shorter than a minute."""
    if value == 0:
        return 0
    if value < 60:
        return f"0:{str(round_half_up(value)).zfill(2)}"
    return round_half_up(value / 60)


def kilograms_to_pounds(value):
    return round_half_up(value * 2.20462)


def density_to_pounds_per_cubic_foot(value):
    return round_half_up(value * 0.062428)


def lux_to_foot_candles(value):
    return round_half_up(value * 0.092903)


def meters_per_second_to_feet_per_second(value):
    return round_half_up(value * 3.28084, 2)


class MeasurementCategory:
    """A physical quantity and how to express it in each unit system."""

    def __init__(
        self,
        name: str,
        si_unit: str,
        keys: Iterable[str],
        metric: Optional[Callable[[Number], Converted]] = None,
        imperial: Optional[Callable[[Number], Converted]] = None,
    ):
        self.name = name
        self.si_unit = si_unit
        self.keys: FrozenSet[str] = frozenset(key.lower() for key in keys)
        self._formulas = MappingProxyType({METRIC: metric, IMPERIAL: imperial})

    def __repr__(self):
        return f"<MeasurementCategory {self.name} ({self.si_unit})>"

    def convert(self, value, unit: str = SI):
        """Convert an SI value; non-numeric or non-finite values come back untouched."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return value
        if not math.isfinite(value):
            return value
        formula = self._formulas.get(unit)
        if formula is None:
            return value
        return formula(value)


TEMPERATURE = MeasurementCategory(
    "temperature",
    "K",
    ["airtemperature", "lowesttemperature", "temperature"],
    metric=kelvin_to_celsius,
    imperial=kelvin_to_fahrenheit,
)

# Breathing consumption is strictly m^3/s; it shares the volume scaling
VOLUME = MeasurementCategory(
    "volume",
    "m^3",
    [
        "breathingconsumptionvolume",
        "breathingconsumptionvolumebegin",
        "breathingconsumptionvolumeend",
        "breathingconsumptionvolumestep",
        "tankvolume",
        "tankvolumebegin",
        "tankvolumeend",
        "tankvolumestep",
        "totallungcapacity",
        "vitalcapacity",
    ],
    metric=cubic_meters_to_liters,
    imperial=cubic_meters_to_cubic_feet,
)

LENGTH = MeasurementCategory(
    "length",
    "m",
    [
        "altitude",
        "altitudeofexposure",
        "arealength",
        "averagedepth",
        "averagevisibility",
        "beam",
        "dcalarmdepth",
        "depth",
        "divedepthbegin",
        "divedepthend",
        "divedepthstep",
        "draught",
        "equivalentairdepth",
        "focallength",
        "focusingdistance",
        "greatestdepth",
        "height",
        "length",
        "maximumdepth",
        "maximumoperatingdepth",
        "maximumvisibility",
        "minimumdepth",
        "minimumvisibility",
        "r0",
        "setdcaltitude",
        "setdcdivedepthalarm",
        "size",
        "visibility",
        "wayaltitude",
    ],
    imperial=meters_to_feet,
)

PRESSURE = MeasurementCategory(
    "pressure",
    "Pa",
    [
        "calculatedpo2",
        "highestpo2",
        "measuredpo2",
        "pressuredrop",
        "surfacepressure",
        "tankpressureend",
        "tankpressurereserve",
        "tankpressure",
        "tankpressurebegin",
    ],
    metric=pascal_to_bar,
    imperial=pascal_to_psi,
)

# "period" belongs to <dcalarm> and stays in seconds
DURATION = MeasurementCategory(
    "duration",
    "s",
    [
        "bottomtimemaximum",
        "bottomtimeminimum",
        "bottomtimestepbegin",
        "bottomtimestepend",
        "desaturationtime",
        "diveduration",
        "divetime",
        "nodecotime",
        "noflighttime",
        "passedtime",
        "remainingbottomtime",
        "remainingo2time",
        "surfaceintervalbeforealtitudeexposure",
        "timespan",
        "timespanbeforedive",
        "totallengthofexposure",
    ],
    imperial=seconds_to_minutes,
)

MASS = MeasurementCategory(
    "mass",
    "kg",
    ["displacement", "leadquantity", "tonnage", "weight"],
    imperial=kilograms_to_pounds,
)

DENSITY = MeasurementCategory(
    "density",
    "kg/m^3",
    ["density"],
    imperial=density_to_pounds_per_cubic_foot,
)

ILLUMINANCE = MeasurementCategory(
    "illuminance",
    "lx",
    ["lightintensity"],
    imperial=lux_to_foot_candles,
)

ASCENT_RATE = MeasurementCategory(
    "ascent_rate",
    "m/s",
    ["maximumascendingrate"],
    imperial=meters_per_second_to_feet_per_second,
)

CATEGORIES = (
    TEMPERATURE,
    VOLUME,
    LENGTH,
    PRESSURE,
    DURATION,
    MASS,
    DENSITY,
    ILLUMINANCE,
    ASCENT_RATE,
)


def build_field_index(categories: Iterable[MeasurementCategory]) -> Dict[str, MeasurementCategory]:
    """Index categories by field name, refusing keys claimed twice."""
    index: Dict[str, MeasurementCategory] = {}
    for category in categories:
        for key in category.keys:
            if key in index:
                raise ValueError(
                    f"Field {key!r} is claimed by both {index[key].name} and {category.name}"
                )
            index[key] = category
    return index


FIELD_CATEGORIES = MappingProxyType(build_field_index(CATEGORIES))


def category_for(field_name) -> Optional[MeasurementCategory]:
    """Look up the category of a field name, ignoring case."""
    if not isinstance(field_name, str):
        return None
    return FIELD_CATEGORIES.get(field_name.lower())
