import logging
import can
from can import Listener

from .errors import MalformedFrameError
from .identifier import CANIdentifier

logger = logging.getLogger(__name__)

CAN_DATA_LENGTH = 8


class CANFrame:
    """A classical CAN frame as exchanged with the hardware layer.

    The frame is a plain value: it does not check the identifier or the data
    length against each other. The hardware interface that creates it is
    trusted to hand in consistent values, unless the frame is constructed with
    ``strict=True``.
    """

    def __init__(self, timestamp_us=0, identifier=0, channel=0, data=(), data_length=None, is_extended_frame=False, strict=False):
        """
        :param int timestamp_us:
            Monotonic timestamp in microseconds
        :param int identifier:
            11-bit or 29-bit CAN identifier, stored in 32 bit
        :param int channel:
            Index of the CAN channel, its meaning is up to the hardware layer
        :param data:
            Payload, anything that can be converted to bytes. Stored in an
            8 byte buffer, padded with zeros.
        :param int data_length:
            Number of valid payload bytes, defaults to the length of `data`
        :param bool is_extended_frame:
            True for 29-bit identifiers
        :param bool strict:
            Raise MalformedFrameError if the payload does not fit into a
            classical CAN frame
        """
        data = bytes(data)
        if data_length is None:
            data_length = min(len(data), CAN_DATA_LENGTH)

        if strict:
            if len(data) > CAN_DATA_LENGTH:
                raise MalformedFrameError(len(data))
            if (data_length < 0) or (data_length > CAN_DATA_LENGTH):
                raise MalformedFrameError(data_length)

        self.timestamp_us = timestamp_us
        self.identifier = identifier
        self.channel = channel
        self.data = bytearray(data[:CAN_DATA_LENGTH].ljust(CAN_DATA_LENGTH, b'\x00'))
        self.data_length = data_length
        self.is_extended_frame = is_extended_frame

    @classmethod
    def from_can_message(cls, msg, channel=None):
        """Converts a python-can message into a frame

        :param can.Message msg:
            The received message
        :param int channel:
            Channel index used when the message carries no integer channel
        """
        if isinstance(msg.channel, int):
            channel = msg.channel
        elif channel is None:
            channel = 0
        return cls(
            timestamp_us=int(round(msg.timestamp * 1000000)),
            identifier=msg.arbitration_id,
            channel=channel,
            data=msg.data,
            data_length=msg.dlc,
            is_extended_frame=msg.is_extended_id,
        )

    def to_can_message(self):
        """Converts the frame into a python-can message ready to be sent"""
        return can.Message(
            timestamp=self.timestamp_us / 1000000,
            arbitration_id=self.identifier,
            is_extended_id=self.is_extended_frame,
            channel=self.channel,
            dlc=self.data_length,
            data=self.payload,
        )

    @property
    def payload(self):
        """The valid part of the data buffer"""
        return bytes(self.data[:self.data_length])

    @property
    def can_identifier(self):
        """Priority, PGN and source address of an extended frame, None for standard frames"""
        if not self.is_extended_frame:
            return None
        return CANIdentifier(can_id=self.identifier)

    def __eq__(self, other):
        if not isinstance(other, CANFrame):
            return NotImplemented
        return (
            self.timestamp_us == other.timestamp_us
            and self.identifier == other.identifier
            and self.channel == other.channel
            and self.data == other.data
            and self.data_length == other.data_length
            and self.is_extended_frame == other.is_extended_frame
        )

    __hash__ = None

    def __repr__(self):
        id_str = "0x{:08X}".format(self.identifier) if self.is_extended_frame else "0x{:03X}".format(self.identifier)
        return "CANFrame(timestamp_us={}, identifier={}, channel={}, data={}, data_length={})".format(
            self.timestamp_us, id_str, self.channel, self.payload.hex(), self.data_length)


class FrameListener(Listener):
    """Listens for messages on a python-can bus and hands them over as CANFrame.

    :param callback:
        Called with one CANFrame for every received data frame.
    :param int channel:
        Channel index for messages whose channel is not an integer
    """

    def __init__(self, callback, channel=None):
        self.callback = callback
        self.channel = channel

    def on_message_received(self, msg: can.Message):
        if msg.is_error_frame or msg.is_remote_frame or msg.is_fd:
            logger.debug("Skipping non classical data frame with id 0x%X", msg.arbitration_id)
            return

        try:
            self.callback(CANFrame.from_can_message(msg, self.channel))
        except Exception as e:
            # Exceptions in any callbacks should not affect CAN processing
            logger.error(str(e))
