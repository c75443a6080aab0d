import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


def convert_to_serializable_dict(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return convert_to_serializable_dict(obj.model_dump())
    if isinstance(obj, dict):
        return {str(k): convert_to_serializable_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [convert_to_serializable_dict(i) for i in obj]
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, type):
        return obj.__name__
    if callable(obj):
        return str(obj)
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return str(obj)
