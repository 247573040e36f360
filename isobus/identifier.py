class ParameterGroupNumber:
    """Parameter Group Number (PGN).

    The PGN consists of four parts:
      * 1-bit Reserved (Extended Data Page)
      * 1-bit Data Page (DP)
      * 8-bit PDU Format (PF)
      * 8-bit PDU Specific (PS)

    A PF value from 0 to 239 (PDU1) indicates a destination address (DA) in PS
    (peer-to-peer communication). A PF value from 240 to 255 (PDU2) indicates
    a Group Extension (GE) inside the PS (broadcast message).
    """

    class PGN:
        ADDRESSCLAIM        = 60928  # EE00

    class Address:
        GLOBAL              = 255

    def __init__(self, data_page=0, pdu_format=0, pdu_specific=0):
        """
        :param data_page:
            1-bit Data Page
        :param pdu_format:
            8-bit PDU Format
        :param pdu_specific:
            8-bit PDU Specific
        """
        self.data_page = data_page & 0x01
        self.pdu_format = pdu_format & 0xFF
        self.pdu_specific = pdu_specific & 0xFF

    @classmethod
    def from_value(cls, value):
        return cls((value >> 16) & 0x01, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def is_pdu1_format(self):
        """Indicates Peer-to-Peer communication"""
        return self.pdu_format <= 239

    @property
    def is_pdu2_format(self):
        """Indicates broadcast communication"""
        return self.pdu_format >= 240

    @property
    def value(self):
        """Returns the value of the PGN"""
        return (self.data_page << 16) | (self.pdu_format << 8) | self.pdu_specific


class CANIdentifier:
    """The 29-bit identifier of an extended CAN frame.

    The identifier consists of three parts:
      * 3-bit Priority
      * 18-bit Parameter Group Number
      * 8-bit Source Address
    """

    def __init__(self, **kwargs):
        """
        :param priority:
            3-bit Priority
        :param parameter_group_number:
            18-bit Parameter Group Number
        :param source_address:
            8-bit Source Address

        :param can_id:
            A 29-bit CAN-Id the identifier should be parsed from.
        """
        if 'can_id' in kwargs:
            self.can_id = kwargs['can_id']
        else:
            self.priority = kwargs.get('priority', 0) & 7
            self.parameter_group_number = kwargs.get('parameter_group_number', 0) & 0x3FFFF
            self.source_address = kwargs.get('source_address', 0) & 0xFF

    @property
    def can_id(self):
        """Transforms the identifier to a 29 bit CAN-Id"""
        return (self.priority << 26) | (self.parameter_group_number << 8) | self.source_address

    @can_id.setter
    def can_id(self, can_id):
        self.source_address = can_id & 0xFF
        self.parameter_group_number = (can_id >> 8) & 0x3FFFF
        self.priority = (can_id >> 26) & 0x7

    @property
    def pgn(self):
        return ParameterGroupNumber.from_value(self.parameter_group_number)

    @property
    def pdu_format(self):
        return (self.parameter_group_number >> 8) & 0xFF

    @property
    def pdu_specific(self):
        return self.parameter_group_number & 0xFF

    @property
    def is_pdu1_format(self):
        return self.pgn.is_pdu1_format

    @property
    def is_address_claim(self):
        """True for address claimed messages (PGN 0xEE00, data page 0)"""
        return (self.parameter_group_number & 0x3FF00) == ParameterGroupNumber.PGN.ADDRESSCLAIM

    @property
    def destination_address(self):
        """Destination of a PDU1 message, GLOBAL for broadcast (PDU2) messages"""
        if self.is_pdu1_format:
            return self.pdu_specific
        return ParameterGroupNumber.Address.GLOBAL

    def __eq__(self, other):
        if not isinstance(other, CANIdentifier):
            return NotImplemented
        return self.can_id == other.can_id

    __hash__ = None

    def __repr__(self):
        return "CANIdentifier(priority={}, parameter_group_number=0x{:05X}, source_address={})".format(
            self.priority, self.parameter_group_number, self.source_address)
