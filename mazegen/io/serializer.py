import json
import logging
import struct
import zlib
from typing import Any, Dict, Tuple
from mazegen.core.grid import ALL_DIRECTIONS, Maze

logger = logging.getLogger(__name__)

class MazeSerializer:
    MAGIC = b"MAZE"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1
    FLAG_SEED_ONLY = 2

    @staticmethod
    def save(grid: Maze, filepath: str, meta: Dict[str, Any] = None, seed_only=False, compress=False):
        """
        Saves the maze to a binary file.
        Format:
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - WIDTH (4 bytes)
        - HEIGHT (4 bytes)
        - META_LEN (2 bytes)
        - META_JSON (META_LEN bytes)
        - DATA_LEN (4 bytes, 0 if seed_only)
        - DATA (one wall-mask byte per cell, row-major; compressed or raw)
        """
        if meta is None:
            meta = {}
        if seed_only and meta.get("seed") is None:
            raise ValueError("seed_only requires a 'seed' entry in meta")

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED
        if seed_only:
            flags |= MazeSerializer.FLAG_SEED_ONLY

        meta_bytes = json.dumps(meta).encode('utf-8')
        if len(meta_bytes) > 0xFFFF:
            raise ValueError(f"Metadata too large: {len(meta_bytes)} bytes (max 65535)")

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.MAGIC)
            f.write(struct.pack("<B", MazeSerializer.VERSION))
            f.write(struct.pack("<B", flags))
            f.write(struct.pack("<II", grid.width, grid.height))
            f.write(struct.pack("<H", len(meta_bytes)))
            f.write(meta_bytes)

            if seed_only:
                f.write(struct.pack("<I", 0))  # No data length
            else:
                data = bytes(grid.wall_mask(coord) for coord in grid.coords())
                if compress:
                    data = zlib.compress(data)

                f.write(struct.pack("<I", len(data)))
                f.write(data)

        logger.info("Saved %dx%d maze to %s", grid.width, grid.height, filepath)

    @staticmethod
    def _unpack(f, fmt: str):
        size = struct.calcsize(fmt)
        data = f.read(size)
        if len(data) != size:
            raise ValueError("Truncated maze file")
        return struct.unpack(fmt, data)

    @staticmethod
    def load(filepath: str) -> Tuple[Maze, Dict[str, Any]]:
        with open(filepath, "rb") as f:
            magic = f.read(4)
            if magic != MazeSerializer.MAGIC:
                raise ValueError("Invalid file format")

            version, flags = MazeSerializer._unpack(f, "<BB")
            if version != MazeSerializer.VERSION:
                raise ValueError(f"Unsupported maze file version {version}")
            width, height = MazeSerializer._unpack(f, "<II")
            meta_len = MazeSerializer._unpack(f, "<H")[0]
            meta = json.loads(f.read(meta_len).decode('utf-8'))

            data_len = MazeSerializer._unpack(f, "<I")[0]

            if flags & MazeSerializer.FLAG_SEED_ONLY:
                # Rebuild from the stored seed
                from mazegen.algo.dfs import generate_maze
                grid = generate_maze((width, height), seed=meta["seed"])
            else:
                data = f.read(data_len)
                if flags & MazeSerializer.FLAG_COMPRESSED:
                    data = zlib.decompress(data)
                if len(data) != width * height:
                    raise ValueError(f"Expected {width * height} cells, found {len(data)}")

                grid = Maze((width, height))
                grid.disable_all_walls()
                for coord, mask in zip(grid.coords(), data):
                    for direction in ALL_DIRECTIONS:
                        if mask & direction:
                            grid.enable_wall(coord, direction)

        logger.info("Loaded %dx%d maze from %s", width, height, filepath)
        return grid, meta
