from typing import Any, Dict

from helpers.util import convert_to_serializable_dict


def enrich_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Converts a configuration dictionary (which may hold pydantic models) into nested plain
    dicts and drops entries that are None.
    """
    serializable_config = convert_to_serializable_dict(config)
    return _drop_none(serializable_config)


def _drop_none(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _drop_none(v) for k, v in obj.items() if v is not None}
    return obj
