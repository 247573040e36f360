class IsobusError(Exception):
    """Base class of all errors raised by this package"""


class NameFieldRangeError(IsobusError, ValueError):
    """A NAME field received a value that does not fit into its bit width.

    Only raised by NAME objects created with ``strict=True``.
    """

    def __init__(self, field, value, minimum, maximum):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            "Value {} out of range for NAME field '{}' (valid range {}..{})".format(value, field, minimum, maximum)
        )


class MalformedFrameError(IsobusError, ValueError):
    """A classical CAN frame was constructed with a data length outside 0..8"""

    def __init__(self, data_length):
        self.data_length = data_length
        super().__init__("Data length {} of classical CAN frame is not within 0..8".format(data_length))
