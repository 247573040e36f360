import logging
import time
import can
import isobus

logging.basicConfig(level=logging.INFO)
logging.getLogger('isobus').setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)


def on_frame(frame):
    """Prints every NAME seen in an address claimed message"""
    mid = frame.can_identifier
    if mid is None or not mid.is_address_claim:
        return
    name = isobus.Name.from_frame(frame)
    logger.info("Address %d claimed by %r (%s, manufacturer %d, identity %d)",
                mid.source_address, name, name.function_label(), name.manufacturer_code, name.identity_number)


def main():
    bus = can.interface.Bus(interface='virtual', channel=1, receive_own_messages=True)
    notifier = can.Notifier(bus, [isobus.FrameListener(on_frame, channel=0)])

    # compose a NAME and claim address 128 with it
    name = isobus.Name(
        arbitrary_address_capable=True,
        industry_group=isobus.IndustryGroup.AgriculturalAndForestry,
        device_class_instance=0,
        device_class=0,
        function_code=isobus.AgriculturalNonSpecificFunction.NonVirtualTerminalDisplay,
        function_instance=0,
        ecu_instance=0,
        manufacturer_code=666,
        identity_number=1234567,
    )
    mid = isobus.CANIdentifier(priority=6, parameter_group_number=isobus.ParameterGroupNumber.PGN.ADDRESSCLAIM | 0xFF, source_address=128)
    frame = isobus.CANFrame(identifier=mid.can_id, data=name.bytes, is_extended_frame=True)
    bus.send(frame.to_can_message())

    time.sleep(0.5)
    notifier.stop()
    bus.shutdown()


if __name__ == '__main__':
    main()
