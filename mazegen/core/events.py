import struct
from typing import Iterator, Tuple

# Event Types
EVT_VISIT = 0x02
EVT_CARVE = 0x03
EVT_BUILD = 0x04
EVT_BACKTRACK = 0x05
EVT_RESET = 0x06
EVT_CLEAR = 0x07

MAGIC = b"MAZELOG"

# Coordinates are packed as unsigned shorts
MAX_SIDE = 0xFFFF

# Payload layout per event type (after the 1-byte type code)
_PAYLOADS = {
    EVT_VISIT: struct.Struct(">HH"),
    EVT_CARVE: struct.Struct(">HHB"),
    EVT_BUILD: struct.Struct(">HHB"),
    EVT_BACKTRACK: struct.Struct(">HH"),
    EVT_RESET: None,
    EVT_CLEAR: None,
}


class EventWriter:
    """
    Appends generation events to a binary log.
    Mazes are limited to MAX_SIDE cells per side.
    """

    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")
        self.event_count = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def write_header(self, width: int, height: int):
        if not (0 < width <= MAX_SIDE and 0 < height <= MAX_SIDE):
            raise ValueError(f"Event log supports mazes up to {MAX_SIDE}x{MAX_SIDE}, got {width}x{height}")
        # Header: Magic "MAZELOG" + Width (4b) + Height (4b)
        self.file.write(MAGIC + struct.pack(">II", width, height))

    def _write(self, type_code: int, *values):
        # Type byte and payload go out in one write
        record = struct.pack(">B", type_code)
        payload = _PAYLOADS[type_code]
        if payload is not None:
            record += payload.pack(*values)
        self.file.write(record)
        self.event_count += 1

    def log_visit(self, x: int, y: int):
        self._write(EVT_VISIT, x, y)

    def log_carve(self, x: int, y: int, direction: int):
        self._write(EVT_CARVE, x, y, int(direction))

    def log_build(self, x: int, y: int, direction: int):
        self._write(EVT_BUILD, x, y, int(direction))

    def log_backtrack(self, x: int, y: int):
        self._write(EVT_BACKTRACK, x, y)

    def log_reset(self):
        self._write(EVT_RESET)

    def log_clear(self):
        self._write(EVT_CLEAR)

    def close(self):
        if self.file:
            self.file.close()
            self.file = None


class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.width = 0
        self.height = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(8)
        if len(data) != 8:
            raise ValueError("Truncated event log header")
        self.width, self.height = struct.unpack(">II", data)
        return self.width, self.height

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = type_byte[0]
            if type_code not in _PAYLOADS:
                raise ValueError(f"Unknown event type {type_code:#04x}")

            payload = _PAYLOADS[type_code]
            if payload is None:
                yield (type_code, ())
                continue

            data = self.file.read(payload.size)
            if len(data) != payload.size:
                raise ValueError("Truncated event in log")
            yield (type_code, payload.unpack(data))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
