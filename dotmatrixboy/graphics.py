"""Turning LCD pixels and video RAM tiles into RGBA images."""

from __future__ import annotations

from typing import Protocol, Sequence

LCD_WIDTH = 160
LCD_HEIGHT = 144

TILE_SIZE = 8
TILES_PER_ROW = 16
TILE_COUNT = 384
TILE_BYTES = 16
TILE_SHEET_WIDTH = TILES_PER_ROW * TILE_SIZE  # 128
TILE_SHEET_HEIGHT = (TILE_COUNT // TILES_PER_ROW) * TILE_SIZE  # 192

TILE_DATA_START = 0x8000
BG_PALETTE = 0xFF47

# RGBA shade for each colour id 0..3
SHADES: tuple[bytes, ...] = (
    bytes((155, 188, 15, 255)),
    bytes((139, 172, 15, 255)),
    bytes((48, 98, 48, 255)),
    bytes((15, 56, 15, 255)),
)

UV = tuple[tuple[float, float], tuple[float, float]]


class _Readable(Protocol):
    def read(self, address: int) -> int: ...


def lcd_to_rgba(pixels: Sequence[int]) -> bytes:
    """Map a 160x144 frame of colour ids to RGBA bytes, row by row.

    Colour ids outside 0..3 leave their pixel fully transparent black.
    """
    if len(pixels) != LCD_WIDTH * LCD_HEIGHT:
        raise ValueError(
            f"expected {LCD_WIDTH * LCD_HEIGHT} pixels, got {len(pixels)}"
        )
    blank = bytes(4)
    return b"".join(SHADES[p] if 0 <= p < len(SHADES) else blank for p in pixels)


def decode_tiles(memory: _Readable) -> bytes:
    """Render all 384 tiles of video RAM as a 128x192 RGBA sheet.

    Tiles are laid out 16 to a row; colours pass through the background
    palette register.
    """
    bg_palette = memory.read(BG_PALETTE)
    shades = [SHADES[(bg_palette >> (index * 2)) & 0x03] for index in range(4)]
    sheet = bytearray(TILE_SHEET_WIDTH * TILE_SHEET_HEIGHT * 4)

    for tile in range(TILE_COUNT):
        origin_x = (tile % TILES_PER_ROW) * TILE_SIZE
        origin_y = (tile // TILES_PER_ROW) * TILE_SIZE
        base = TILE_DATA_START + tile * TILE_BYTES
        for row in range(TILE_SIZE):
            low = memory.read(base + row * 2)
            high = memory.read(base + row * 2 + 1)
            start = ((origin_y + row) * TILE_SHEET_WIDTH + origin_x) * 4
            line = b"".join(
                shades[(((high >> bit) & 1) << 1) | ((low >> bit) & 1)]
                for bit in range(7, -1, -1)
            )
            sheet[start:start + TILE_SIZE * 4] = line
    return bytes(sheet)


def _sheet_uv(x: int, y: int) -> UV:
    return (
        (x / TILE_SHEET_WIDTH, y / TILE_SHEET_HEIGHT),
        ((x + TILE_SIZE) / TILE_SHEET_WIDTH, (y + TILE_SIZE) / TILE_SHEET_HEIGHT),
    )


def _check_tile_id(tile_id: int) -> None:
    if not 0 <= tile_id <= 0xFF:
        raise ValueError(f"tile id {tile_id!r} is outside 0..255")


def tile_uv(tile_id: int, unsigned_addressing: bool) -> UV:
    """Texture coordinates on the tile sheet of a background-map tile id.

    With signed addressing, ids below 128 refer to the third block of tiles.
    """
    _check_tile_id(tile_id)
    row_offset = 0
    if not unsigned_addressing and tile_id < 128:
        row_offset = 16
    x = (tile_id % TILES_PER_ROW) * TILE_SIZE
    y = (tile_id // TILES_PER_ROW + row_offset) * TILE_SIZE
    return _sheet_uv(x, y)


def oam_tile_uv(tile_index: int) -> UV:
    """Texture coordinates on the tile sheet of a sprite's tile index."""
    _check_tile_id(tile_index)
    x = (tile_index * TILE_SIZE) % TILE_SHEET_WIDTH
    y = ((tile_index * TILE_SIZE) // TILE_SHEET_WIDTH) * TILE_SIZE
    return _sheet_uv(x, y)