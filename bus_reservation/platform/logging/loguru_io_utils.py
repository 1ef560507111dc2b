from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from bus_reservation.platform.logging.loguru_io_config import (
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'

# Matches keyword='value' / keyword="value" as rendered by attrs and dataclass reprs
_SENSITIVE_PATTERN = re.compile(
    rf'\b({"|".join(sorted(SENSITIVE_KEYWORDS))})=(\'[^\']*\'|"[^"]*")'
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def mask_sensitive(data: Any) -> Any:
    try:
        data_str = str(data)
        masked = _SENSITIVE_PATTERN.sub(rf"\1='{MASK}'", data_str)
        return data if data_str == masked else masked
    except Exception:
        # str() of arbitrary objects may raise; logging must never break the call
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    data_str = str(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}... [truncated {len(data_str) - max_length} chars]'
