import re
from typing import List, Tuple

ORIGIN_RE = re.compile(r"^([a-zA-Z])([0-9]+)$")


class ConfigurationError(ValueError):
    pass


def parse_origin(text, rows, cols) -> Tuple[int, int]: # "a1" -> (x, y)，第 1 行是最下面一行
    match = ORIGIN_RE.match(text.strip())
    if not match:
        raise ConfigurationError(f"origin must be a column letter and a row number, got {text!r}")
    x = ord(match.group(1).lower()) - ord("a")
    row = int(match.group(2))
    if not (0 <= x < cols and 1 <= row <= rows):
        raise ConfigurationError(f"origin {text!r} is outside a {rows}x{cols} board")
    return x, rows - row


def format_origin(x, y, rows):
    return f"{chr(ord('a') + x)}{rows - y}"


def format_ranks(ranks: List[List[int]]):
    return "\n".join(" ".join(str(rank) for rank in row) for row in ranks)
