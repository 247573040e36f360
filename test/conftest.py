import random

import pytest

import isobus

# the NAME used by the address claim tests of the CA layer
CLAIM_NAME_FIELDS = dict(
    arbitrary_address_capable=0,
    industry_group=isobus.IndustryGroup.Industrial,
    device_class_instance=2,
    device_class=127,
    function_code=201,
    function_instance=16,
    ecu_instance=2,
    manufacturer_code=666,
    identity_number=1234567,
)
CLAIM_NAME_BYTES = [135, 214, 82, 83, 130, 201, 254, 82]


@pytest.fixture()
def zero_name():
    return isobus.Name(0)


@pytest.fixture()
def strict_name():
    return isobus.Name(0, strict=True)


@pytest.fixture()
def raw_names():
    """A reproducible sample of raw 64-bit NAMEs, including the corner cases"""
    rnd = random.Random(11783)
    return [0, 1, 1 << 48, 1 << 63, (1 << 64) - 1] + [rnd.getrandbits(64) for _ in range(64)]
