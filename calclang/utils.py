import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(v: float) -> str:
    """Shortest form with 6 significant digits: 14.0 -> '14', 1 / 3 -> '0.333333'"""
    return f"{v:g}"
