from dataclasses import dataclass

from termcolor import colored

ERROR_COLOR = "red"


@dataclass(eq=False)
class CalcError(Exception):
    """Base for every user-facing error; pos is the column printed after the line number"""

    errmsg: str
    pos: int

    def __str__(self) -> str:
        return self.errmsg


def format_error(error: CalcError, source_name: str, line_num: int, color: bool = False) -> str:
    prefix = f"{source_name}:{line_num}:{error.pos}: error: "
    if color:
        prefix = colored(prefix, ERROR_COLOR, attrs=["bold"])
    return prefix + error.errmsg
