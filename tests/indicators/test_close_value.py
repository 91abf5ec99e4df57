import pandas as pd
import pytest

from smoothline.indicators import close_value
from smoothline.protocols import Close
from tests.helpers.bars import Bar, MethodCloseBar


def test_close_value_from_attribute():
    assert close_value(Bar(close=3)) == 3.0
    assert isinstance(close_value(Bar(close=3)), float)


def test_close_value_from_method():
    assert close_value(MethodCloseBar(4.5)) == 4.5


def test_close_value_from_mapping_and_series():
    assert close_value({"close": "1.25"}) == 1.25
    assert close_value(pd.Series({"close": 2.5, "volume": 10.0})) == 2.5


def test_close_value_missing_field():
    with pytest.raises(TypeError, match="close"):
        close_value({"price": 1.0})
    with pytest.raises(TypeError, match="int"):
        close_value(5)


def test_close_protocol():
    assert isinstance(Bar(close=1.0), Close)
    assert isinstance(MethodCloseBar(1.0), Close)
    assert not isinstance(1.0, Close)
