import uuid

import pytest

from blockhost.uuidutil import canonicalize_uuid, valid_undashed_uuid

SAMPLE = "069a79f444e94726a5befca90e38aaf5"


def test_valid_undashed_uuid_accepts_hex():
    assert valid_undashed_uuid(SAMPLE) is True
    assert valid_undashed_uuid(SAMPLE.upper()) is True


@pytest.mark.parametrize(
    "value",
    ["", SAMPLE[:-1], SAMPLE + "0", "g" + SAMPLE[1:], "069a79f4-44e9-4726-a5be-fca90e38aaf5"],
)
def test_valid_undashed_uuid_rejects(value):
    assert valid_undashed_uuid(value) is False


def test_canonicalize_pinned():
    assert canonicalize_uuid(SAMPLE) == "069a79f4-44e9-4726-a5be-fca90e38aaf5"


def test_canonicalize_round_trip_through_uuid():
    result = canonicalize_uuid(SAMPLE)
    assert result.replace("-", "") == SAMPLE
    assert uuid.UUID(result).hex == SAMPLE
    assert [len(part) for part in result.split("-")] == [8, 4, 4, 4, 12]


def test_canonicalize_rejects_invalid():
    with pytest.raises(ValueError):
        canonicalize_uuid("not-a-uuid")