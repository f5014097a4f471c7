import pytest

from claudetypes.top_k import TopK


def test_new():
    assert TopK(50).value == 50


def test_default():
    assert TopK().value == 50


def test_display():
    assert str(TopK(50)) == "50"


def test_serialize():
    assert TopK(50).to_json() == "50"


def test_deserialize():
    assert TopK.from_json("50") == TopK(50)


def test_ordering():
    assert TopK(1) < TopK(50)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_out_of_range(value):
    with pytest.raises(ValueError):
        TopK(value)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        TopK(1.5)


@pytest.mark.parametrize("text", ["50.5", '"50"', "-3"])
def test_deserialize_invalid(text):
    with pytest.raises(ValueError):
        TopK.from_json(text)