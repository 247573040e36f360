import functools
import logging
from collections import namedtuple

from .errors import NameFieldRangeError
from .function import IndustryGroup, function_label
from .identifier import CANIdentifier

logger = logging.getLogger(__name__)


class NameField(namedtuple('NameField', ['name', 'offset', 'width', 'description'])):
    """Position of one subfield inside the 64-bit NAME"""
    __slots__ = ()

    @property
    def mask(self):
        return (1 << self.width) - 1

    @property
    def bits(self):
        """Mask of the field at its position inside the NAME"""
        return self.mask << self.offset


IDENTITY_NUMBER             = NameField('identity_number', 0, 21, 'Identity Number')
MANUFACTURER_CODE           = NameField('manufacturer_code', 21, 11, 'Manufacturer Code')
ECU_INSTANCE                = NameField('ecu_instance', 32, 3, 'ECU Instance')
FUNCTION_INSTANCE           = NameField('function_instance', 35, 5, 'Function Instance')
FUNCTION_CODE               = NameField('function_code', 40, 8, 'Function')
RESERVED                    = NameField('reserved', 48, 1, 'Reserved')
DEVICE_CLASS                = NameField('device_class', 49, 7, 'Device Class')
DEVICE_CLASS_INSTANCE       = NameField('device_class_instance', 56, 4, 'Device Class Instance')
INDUSTRY_GROUP              = NameField('industry_group', 60, 3, 'Industry Group')
ARBITRARY_ADDRESS_CAPABLE   = NameField('arbitrary_address_capable', 63, 1, 'Arbitrary Address Capable')

NAME_FIELDS = (
    IDENTITY_NUMBER,
    MANUFACTURER_CODE,
    ECU_INSTANCE,
    FUNCTION_INSTANCE,
    FUNCTION_CODE,
    RESERVED,
    DEVICE_CLASS,
    DEVICE_CLASS_INSTANCE,
    INDUSTRY_GROUP,
    ARBITRARY_ADDRESS_CAPABLE,
)

# fields with public accessors, the reserved bit is only carried along
ACCESSIBLE_FIELDS = {field.name: field for field in NAME_FIELDS if field is not RESERVED}

NAME_WIDTH = 64
NAME_MASK = (1 << NAME_WIDTH) - 1


def extract(raw, field):
    """Returns the unsigned value of `field` stored in the raw NAME"""
    return (raw >> field.offset) & field.mask


def insert(raw, field, value):
    """Returns the raw NAME with `field` replaced by `value`.

    The old field bits are cleared before the new value is merged in; bits of
    `value` beyond the field width are dropped.
    """
    return (raw & ~field.bits) | ((value & field.mask) << field.offset)


@functools.total_ordering
class Name:
    """The NAME of one Controller Application (ISO 11783-5, SAE J1939-81).

    The NAME consists of 64 bit, from the most significant bit:

        1-bit Arbitrary Address Capable
        Set to 1 if the device is Arbitrary Address Capable, set to 0 if
        it's Single Address Capable.

        3-bit Industry Group
        One of the predefined industry groups, see :class:`IndustryGroup`.

        4-bit Device Class Instance (J1939: Vehicle System Instance)
        Instance number of a device class to distinguish two or more
        devices with the same device class in the same network.

        7-bit Device Class (J1939: Vehicle System)
        Depends on the Industry Group definition. Class 0 is the
        non-specific system.

        1-bit Reserved
        Kept as received, there is no accessor for it.

        8-bit Function
        One of the predefined functions. Values from 128 on mean different
        things for different Industry Groups or Device Classes, see
        :func:`isobus.function.lookup_function`.

        5-bit Function Instance

        3-bit ECU Instance
        Identify the ECU instance if multiple ECUs are involved in
        performing a single function. Normally set to 0.

        11-bit Manufacturer Code
        One of the registered manufacturer codes.

        21-bit Identity Number
        A unique number which identifies the particular device in a
        manufacturer specific way.

    Every field can be read and written as a property (``name.ecu_instance``)
    or with the equivalent ``get_<field>()`` / ``set_<field>()`` methods.
    Writing a field changes only the bits of that field.

    Values too wide for a field are truncated to the field width. A NAME
    created with ``strict=True`` raises :class:`NameFieldRangeError` instead.
    """

    IndustryGroup = IndustryGroup

    def __init__(self, value=None, strict=False, **kwargs):
        """
        :param value:
            64-bit raw NAME, taken as is
        :param bool strict:
            Raise NameFieldRangeError for values which do not fit into a field
            instead of truncating them.
        :param bytes:
            Array of 8 bytes containing the NAME in its little endian wire
            format, as found in an address claimed message.

        Any field name (``identity_number``, ``manufacturer_code``, ...) can
        be given as keyword to build the NAME field by field.
        """
        self._strict = strict
        self._value = 0

        if 'bytes' in kwargs:
            if value is not None:
                raise TypeError("Give either a raw value or bytes for a NAME, not both")
            self.bytes = kwargs.pop('bytes')
        else:
            self.set_full_name(0 if value is None else value)

        for key, field_value in kwargs.items():
            if key not in ACCESSIBLE_FIELDS:
                raise TypeError("Unknown NAME field '{}'".format(key))
            self._set(ACCESSIBLE_FIELDS[key], field_value)

    @classmethod
    def from_bytes(cls, data, strict=False):
        return cls(bytes=data, strict=strict)

    @classmethod
    def from_frame(cls, frame, strict=False):
        """Decodes the NAME carried by an address claimed frame

        :param isobus.CANFrame frame:
            Extended frame with PGN 0xEE00 and 8 data bytes
        """
        if not frame.is_extended_frame:
            raise ValueError("Address claimed messages use extended identifiers")
        mid = CANIdentifier(can_id=frame.identifier)
        if not mid.is_address_claim:
            raise ValueError("Frame with PGN 0x{:04X} is not an address claimed message".format(mid.parameter_group_number))
        if frame.data_length != 8:
            raise ValueError("Address claimed message must carry 8 bytes, got {}".format(frame.data_length))
        return cls(bytes=frame.payload, strict=strict)

    @property
    def strict(self):
        return self._strict

    def _set(self, field, value):
        if (value < 0) or (value > field.mask):
            if self._strict:
                raise NameFieldRangeError(field.name, value, 0, field.mask)
            logger.debug("Truncating value %d of NAME field '%s' to %d bit", value, field.name, field.width)
        self._value = insert(self._value, field, int(value))

    def get_arbitrary_address_capable(self):
        return bool(extract(self._value, ARBITRARY_ADDRESS_CAPABLE))

    def set_arbitrary_address_capable(self, value):
        self._set(ARBITRARY_ADDRESS_CAPABLE, value)

    arbitrary_address_capable = property(get_arbitrary_address_capable, set_arbitrary_address_capable)

    def get_industry_group(self):
        return extract(self._value, INDUSTRY_GROUP)

    def set_industry_group(self, value):
        self._set(INDUSTRY_GROUP, value)

    industry_group = property(get_industry_group, set_industry_group)

    def get_device_class_instance(self):
        return extract(self._value, DEVICE_CLASS_INSTANCE)

    def set_device_class_instance(self, value):
        self._set(DEVICE_CLASS_INSTANCE, value)

    device_class_instance = property(get_device_class_instance, set_device_class_instance)

    def get_device_class(self):
        return extract(self._value, DEVICE_CLASS)

    def set_device_class(self, value):
        self._set(DEVICE_CLASS, value)

    device_class = property(get_device_class, set_device_class)

    def get_function_code(self):
        return extract(self._value, FUNCTION_CODE)

    def set_function_code(self, value):
        self._set(FUNCTION_CODE, value)

    function_code = property(get_function_code, set_function_code)

    def get_function_instance(self):
        return extract(self._value, FUNCTION_INSTANCE)

    def set_function_instance(self, value):
        self._set(FUNCTION_INSTANCE, value)

    function_instance = property(get_function_instance, set_function_instance)

    def get_ecu_instance(self):
        return extract(self._value, ECU_INSTANCE)

    def set_ecu_instance(self, value):
        self._set(ECU_INSTANCE, value)

    ecu_instance = property(get_ecu_instance, set_ecu_instance)

    def get_manufacturer_code(self):
        return extract(self._value, MANUFACTURER_CODE)

    def set_manufacturer_code(self, value):
        self._set(MANUFACTURER_CODE, value)

    manufacturer_code = property(get_manufacturer_code, set_manufacturer_code)

    def get_identity_number(self):
        return extract(self._value, IDENTITY_NUMBER)

    def set_identity_number(self, value):
        self._set(IDENTITY_NUMBER, value)

    identity_number = property(get_identity_number, set_identity_number)

    def get_full_name(self):
        """Returns the raw 64-bit NAME"""
        return self._value

    def set_full_name(self, value):
        """Replaces all fields at once with the raw 64-bit NAME"""
        if (value < 0) or (value > NAME_MASK):
            if self._strict:
                raise NameFieldRangeError('full_name', value, 0, NAME_MASK)
            logger.debug("Truncating raw NAME 0x%X to 64 bit", value)
        self._value = int(value) & NAME_MASK

    value = property(get_full_name, set_full_name)

    @property
    def bytes(self):
        """Get the NAME as 8 bytes in wire order (little endian)"""
        return [(self._value >> shift) & 0xFF for shift in range(0, NAME_WIDTH, 8)]

    @bytes.setter
    def bytes(self, value):
        if len(value) < 8:
            raise ValueError("A NAME needs 8 bytes, got {}".format(len(value)))
        self._value = int.from_bytes(bytes(value[:8]), byteorder='little', signed=False)

    def to_bytes(self):
        return self._value.to_bytes(8, byteorder='little', signed=False)

    def matches(self, **kwargs):
        """Checks the NAME against field values, e.g. ``name.matches(function_code=29)``

        :return:
            True if every given field holds the given value
        """
        for key, expected in kwargs.items():
            if key not in ACCESSIBLE_FIELDS:
                raise TypeError("Unknown NAME field '{}'".format(key))
            if getattr(self, key) != expected:
                return False
        return True

    def function_label(self):
        """Symbolic name of the function code in the context of this NAME"""
        return function_label(self.function_code, self.industry_group, self.device_class)

    def copy(self):
        return Name(self._value, strict=self._strict)

    def __int__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self._value < other._value

    __hash__ = None

    def __repr__(self):
        return "Name(0x{:016X})".format(self._value)
