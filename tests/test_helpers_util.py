from enum import Enum

from pydantic import BaseModel

from helpers.util import convert_to_serializable_dict


class SampleModel(BaseModel):
    name: str
    count: int


class Color(Enum):
    RED = 1


def sample_fn(x: int) -> int:
    return x + 1


def test_convert_to_serializable_dict_handles_nested_complex_objects():
    data = {
        "model": SampleModel(name="hello", count=3),
        "callable": sample_fn,
        "type_obj": int,
        "tuple_data": (1, 2, 3),
        "enum": Color.RED,
        "dict_data": {"k": 1},
        1: object,
    }

    out = convert_to_serializable_dict(data)

    assert out["model"] == {"name": "hello", "count": 3}
    assert "sample_fn" in out["callable"]
    assert out["type_obj"] == "int"
    assert out["tuple_data"] == [1, 2, 3]
    assert out["enum"] == "RED"
    assert out["dict_data"] == {"k": 1}
    assert out["1"] == "object"
