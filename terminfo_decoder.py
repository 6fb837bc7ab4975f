"""
Decoder for the legacy compiled terminfo format.

Layout, all integers little-endian:

    header        6 x uint16: magic, name bytes, booleans, numbers,
                  strings, string table bytes
    names         name bytes
    booleans      one byte each
    numbers       int16 each, -1 absent
    offsets       uint16 each into the string table
    string table  NUL separated strings

Anything after the string table (the ncurses extended block) is ignored.
"""

import logging
import struct
from dataclasses import dataclass

import numpy as np

from capability_record import CapabilityRecord
from errors import (
    BadMagic,
    CapacityExceeded,
    FormatError,
    ResourceError,
    TerminfoIOError,
    Truncated,
)
from terminfo_names import MAX_BOOLEANS, MAX_NUMBERS, MAX_STRINGS

logger = logging.getLogger(__name__)

TERMINFO_MAGIC = 0o432
HEADER_FORMAT = "<6H"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


@dataclass(frozen=True)
class CapabilityHeader:
    magic: int
    name_bytes: int
    boolean_count: int
    number_count: int
    string_count: int
    string_table_bytes: int

    @classmethod
    def parse(cls, data: bytes) -> "CapabilityHeader":
        if len(data) < HEADER_SIZE:
            raise Truncated(
                f"header needs {HEADER_SIZE} bytes, file has {len(data)}"
            )
        return cls(*struct.unpack_from(HEADER_FORMAT, data, 0))

    def validate(self) -> None:
        if self.magic != TERMINFO_MAGIC:
            raise BadMagic(
                f"bad magic {self.magic:#o}, expected {TERMINFO_MAGIC:#o}"
            )
        for label, count, limit in (
            ("boolean", self.boolean_count, MAX_BOOLEANS),
            ("number", self.number_count, MAX_NUMBERS),
            ("string", self.string_count, MAX_STRINGS),
        ):
            if count > limit:
                raise CapacityExceeded(
                    f"{count} {label} capabilities declared, at most {limit} allowed"
                )


class _Reader:
    def __init__(self, data: bytes, pos: int = 0):
        self.data = memoryview(data)
        self.pos = pos

    def take(self, size: int, section: str) -> memoryview:
        available = len(self.data) - self.pos
        if available < size:
            raise Truncated(
                f"{section} section needs {size} bytes, only {max(0, available)} left"
            )
        chunk = self.data[self.pos : self.pos + size]
        self.pos += size
        return chunk


def _array(chunk, dtype) -> np.ndarray:
    if len(chunk) == 0:
        return np.empty(0, dtype=dtype)
    return np.frombuffer(chunk, dtype=dtype)


def decode(data: bytes) -> CapabilityRecord:
    header = CapabilityHeader.parse(data)
    # counts come from the file: check them before sizing anything by them
    header.validate()

    reader = _Reader(data, HEADER_SIZE)
    names = reader.take(header.name_bytes, "name")
    booleans = reader.take(header.boolean_count, "boolean")
    numbers = reader.take(header.number_count * 2, "number")
    offsets = reader.take(header.string_count * 2, "string offset")
    heap = reader.take(header.string_table_bytes, "string table")

    if reader.pos < len(data):
        logger.debug("ignoring %d trailing bytes", len(data) - reader.pos)

    try:
        return CapabilityRecord(
            bytes(names),
            _array(booleans, np.uint8),
            _array(numbers, "<i2"),
            _array(offsets, "<u2"),
            bytes(heap),
        )
    except MemoryError as exc:
        raise ResourceError() from exc


def read_terminfo_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise TerminfoIOError(path, exc) from exc


def decode_file(path: str) -> CapabilityRecord:
    data = read_terminfo_bytes(path)
    try:
        record = decode(data)
    except FormatError as exc:
        exc.with_path(path)
        raise
    logger.info(
        "decoded %s: %d booleans, %d numbers, %d strings",
        path,
        record.boolean_count,
        record.number_count,
        record.string_count,
    )
    return record
