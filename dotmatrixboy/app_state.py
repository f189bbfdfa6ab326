"""Persistent application settings and the recent-ROM list."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

DEFAULT_CONFIG_PATH = "Config.json"
MAX_RECENT_ROMS = 10

PathLike = Union[str, Path]

_FIELD_KEYS = (
    ("is_paused", "IsPaused"),
    ("is_boot_rom_enabled", "IsBootRomEnabled"),
    ("show_debugger", "ShowDebugger"),
    ("show_vram_viewer", "ShowVRAMViewer"),
    ("show_lcd", "ShowLCD"),
    ("show_memory_map", "ShowMemoryMap"),
    ("show_audio_debugger", "ShowAudioDebugger"),
    ("show_console", "ShowConsole"),
)


@dataclass
class AppState:
    """Which tools are shown, emulator flags and recently opened ROMs."""

    is_paused: bool = False
    is_boot_rom_enabled: bool = False
    show_debugger: bool = False
    show_vram_viewer: bool = False
    show_lcd: bool = True
    show_memory_map: bool = False
    show_audio_debugger: bool = False
    show_console: bool = False
    recent_roms: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: PathLike = DEFAULT_CONFIG_PATH) -> "AppState":
        """Read settings from ``path``; a missing file gives the defaults."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()

        data = json.loads(text)
        values = {}
        for name, key in _FIELD_KEYS:
            value = data[key]
            if not isinstance(value, bool):
                raise TypeError(f"{key} must be a boolean, not {type(value).__name__}")
            values[name] = value

        roms = data.get("RecentRoms") or []
        if not all(isinstance(rom, str) for rom in roms):
            raise TypeError("RecentRoms must hold strings")
        return cls(recent_roms=list(roms), **values)

    def save(self, path: PathLike = DEFAULT_CONFIG_PATH) -> None:
        """Write the settings to ``path`` as compact JSON."""
        data = {key: getattr(self, name) for name, key in _FIELD_KEYS}
        data["RecentRoms"] = list(self.recent_roms)
        Path(path).write_text(
            json.dumps(data, sort_keys=True, separators=(",", ":")), encoding="utf-8"
        )

    def add_recent_rom(self, path: str) -> None:
        """Move ``path`` to the top of the recent list, keeping at most ten entries."""
        self.recent_roms = [rom for rom in self.recent_roms if rom != path]
        self.recent_roms.insert(0, path)
        del self.recent_roms[MAX_RECENT_ROMS:]