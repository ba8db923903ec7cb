import pytest

from ringkeeper.core.errors import DeviceFileError
from ringkeeper.lib.rings.devices import device_value, format_weight, load_devices


def test_load_devices_skips_blanks_and_comments(tmp_path):
    path = tmp_path / "devices"
    path.write_text(
        "# region zone host device weight\n"
        "1 1 storage-0 sdb 100\n"
        "\n"
        "   1  2   10.0.0.12   sdc   50.5  \n"
    )
    assert load_devices(path) == [
        {"region": 1, "zone": 1, "host": "storage-0", "device": "sdb", "weight": 100.0},
        {"region": 1, "zone": 2, "host": "10.0.0.12", "device": "sdc", "weight": 50.5},
    ]


@pytest.mark.parametrize("line, message", [
    ("1 1 storage-0 sdb", "expected 5 fields"),
    ("one 1 storage-0 sdb 100", "integers"),
    ("1 1 storage-0 sdb heavy", "invalid weight"),
    ("1 1 storage-0 sdb -1", "negative"),
    ("1 1 storage-0 sdb nan", "invalid weight"),
    ("1 1 storage-0 sdb inf", "invalid weight"),
])
def test_malformed_line(tmp_path, line, message):
    path = tmp_path / "devices"
    path.write_text(f"1 1 storage-0 sda 100\n{line}\n")
    with pytest.raises(DeviceFileError, match=f"line 2: .*{message}"):
        load_devices(path)


def test_missing_file(tmp_path):
    with pytest.raises(DeviceFileError):
        load_devices(tmp_path / "nope")


def test_device_value():
    dev = {"region": 2, "zone": 3, "host": "storage-1", "device": "sdd", "weight": 1.0}
    assert device_value(dev, 6200) == "r2z3-storage-1:6200/sdd"


def test_device_value_ipv6():
    dev = {"region": 1, "zone": 1, "host": "fd00::5", "device": "sdb", "weight": 1.0}
    assert device_value(dev, 6201) == "r1z1-[fd00::5]:6201/sdb"


@pytest.mark.parametrize("weight, expected", [
    (100.0, "100"),
    (0.5, "0.5"),
    (1863.0195, "1863.0195"),
    (1234567.0, "1234567"),
])
def test_format_weight_is_lossless(weight, expected):
    assert format_weight(weight) == expected
    assert float(expected) == weight
