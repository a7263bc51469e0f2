from typing import Mapping, Optional


def greeting(params: Mapping[str, Optional[str]], name_param: str = "name") -> str:
    """Text of the welcome page. A missing name leaves the placeholder empty."""
    name = params.get(name_param)
    return f"Hi, {name if name is not None else ''}!"
