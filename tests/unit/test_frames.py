"""
Unit tests -- converting analytics responses to DataFrames.
"""
import pytest

from d2client.analytics.frames import to_dataframe


def test_data_value_set_to_frame():
    frame = to_dataframe({
        "dataValues": [
            {"dataElement": "DE_1", "period": "201709", "value": "17640.0"},
            {"dataElement": "DE_1", "period": "201710", "value": "4668.0"},
        ],
    })
    assert list(frame.columns) == ["dataElement", "period", "value"]
    assert len(frame) == 2


def test_grid_to_frame():
    frame = to_dataframe({
        "headers": [{"name": "dx"}, {"name": "pe"}, {"name": "value"}],
        "rows": [["fbfJHSPpUQD", "2016Q1", "12"], ["fbfJHSPpUQD", "2016Q2", "15"]],
    })
    assert list(frame.columns) == ["dx", "pe", "value"]
    assert frame.iloc[1]["value"] == "15"


def test_empty_grid():
    frame = to_dataframe({"headers": [{"name": "dx"}], "rows": []})
    assert frame.empty
    assert list(frame.columns) == ["dx"]


@pytest.mark.parametrize("response", ["select 1", {"metaData": {}}, None])
def test_unconvertible_response(response):
    with pytest.raises(ValueError):
        to_dataframe(response)
