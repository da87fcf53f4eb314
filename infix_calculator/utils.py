import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__

    def human_name(self) -> str:
        """DIVIDE_BY_ZERO => 'divide by zero'"""
        return self.name.replace("_", " ").lower()


def format_number(x: float) -> str:
    """Shortest round-tripping form, without a trailing '.0' for whole numbers"""
    text = repr(x)
    return text[:-2] if text.endswith(".0") else text
