import numpy as np

from errors import InternalError
from terminfo_names import CapClass


ABSENT_NUMBER = -1
CANCELLED_NUMBER = -2


def escape_byte(b: int) -> str:
    if 0x20 <= b <= 0x7E:
        return chr(b)
    if b < 0x20:
        return "^" + chr(b + 0x40)
    return "\\" + format(b, "03o")


def escape_bytes(data: bytes) -> str:
    return "".join(escape_byte(b) for b in data)


def _frozen(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


class CapabilityRecord:
    """Decoded terminfo entry.

    Owns the terminal name field, the boolean, number and string-offset
    arrays and the string heap. Nothing can be reassigned once built;
    lookups outside the declared counts resolve to sentinels instead of
    raising, since real entries rarely populate every slot.
    """

    __slots__ = ("_name_field", "_booleans", "_numbers", "_offsets", "_heap")

    def __init__(self, name_field: bytes, booleans, numbers, offsets, heap: bytes):
        object.__setattr__(self, "_name_field", bytes(name_field))
        object.__setattr__(self, "_booleans", _frozen(booleans, np.bool_))
        object.__setattr__(self, "_numbers", _frozen(numbers, "<i2"))
        object.__setattr__(self, "_offsets", _frozen(offsets, "<u2"))
        object.__setattr__(self, "_heap", bytes(heap))

    def __setattr__(self, name, value):
        raise AttributeError("CapabilityRecord is immutable")

    def __delattr__(self, name):
        raise AttributeError("CapabilityRecord is immutable")

    def __repr__(self):
        return (
            f"CapabilityRecord({self.names!r}, booleans={self.boolean_count}, "
            f"numbers={self.number_count}, strings={self.string_count})"
        )

    # ---------- names ----------
    @property
    def name_field(self) -> bytes:
        return self._name_field

    @property
    def names(self) -> str:
        raw = self._name_field.split(b"\0", 1)[0]
        return raw.decode("latin-1")

    @property
    def aliases(self) -> list[str]:
        return [a for a in self.names.split("|") if a]

    @property
    def description(self) -> str:
        aliases = self.aliases
        if len(aliases) > 1:
            return aliases[-1]
        return aliases[0] if aliases else ""

    # ---------- counts ----------
    @property
    def boolean_count(self) -> int:
        return len(self._booleans)

    @property
    def number_count(self) -> int:
        return len(self._numbers)

    @property
    def string_count(self) -> int:
        return len(self._offsets)

    @property
    def string_table_bytes(self) -> int:
        return len(self._heap)

    @property
    def total_lines(self) -> int:
        return self.boolean_count + self.number_count + self.string_count

    # ---------- accessors ----------
    def boolean_at(self, i: int) -> bool:
        if i < 0 or i >= self.boolean_count:
            return False
        return bool(self._booleans[i])

    def number_at(self, i: int) -> int:
        if i < 0 or i >= self.number_count:
            return ABSENT_NUMBER
        return int(self._numbers[i])

    def _offset(self, i: int):
        if i < 0 or i >= self.string_count:
            return None
        offset = int(self._offsets[i])
        # offsets at or past the heap end mark an absent string
        if offset >= len(self._heap):
            return None
        return offset

    def has_string(self, i: int) -> bool:
        return self._offset(i) is not None

    def string_at(self, i: int) -> bytes:
        offset = self._offset(i)
        if offset is None:
            return b""
        end = self._heap.find(b"\0", offset)
        if end < 0:
            end = len(self._heap)
        return self._heap[offset:end]

    # ---------- logical lines ----------
    def line_at(self, index: int) -> tuple[CapClass, int]:
        if index < 0 or index >= self.total_lines:
            raise InternalError(
                f"line {index} outside record of {self.total_lines} lines"
            )
        if index < self.boolean_count:
            return CapClass.BOOLEAN, index
        index -= self.boolean_count
        if index < self.number_count:
            return CapClass.NUMBER, index
        return CapClass.STRING, index - self.number_count

    def value_text(self, cap_class: CapClass, index: int) -> str:
        if cap_class is CapClass.BOOLEAN:
            return "true" if self.boolean_at(index) else "false"
        if cap_class is CapClass.NUMBER:
            value = self.number_at(index)
            if value == ABSENT_NUMBER:
                return "absent"
            if value == CANCELLED_NUMBER:
                return "cancelled"
            return str(value)
        if not self.has_string(index):
            return "absent"
        return escape_bytes(self.string_at(index))
