from .version import __version__
from .errors import IsobusError, NameFieldRangeError, MalformedFrameError
from .function import (
    IndustryGroup,
    DeviceClass,
    Function,
    GlobalNonSpecificFunction,
    OnHighwayNonSpecificFunction,
    OnHighwayTractorFunction,
    AgriculturalNonSpecificFunction,
    lookup_function,
    function_label,
)
from .identifier import CANIdentifier, ParameterGroupNumber
from .name import Name, NameField, NAME_FIELDS
from .frame import CANFrame, FrameListener
