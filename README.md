# dotmatrixboy

Building blocks for a Game Boy emulator. The package is plain Python and
has no third-party dependencies.

## Modules

- `dotmatrixboy.memory`: `Memory`, a flat 64 KiB address space.
  `read` and `write` reject addresses outside the space and values that
  do not fit in a byte. It also has `read_register_bit`,
  `write_register_bit` and `reset`.
- `dotmatrixboy.envelope`: `Envelope`, the volume envelope. It steps a
  4-bit volume up or down once every `ticks` clocks.
- `dotmatrixboy.length`: `LengthCounter`. It counts down on each length
  clock and reports whether the channel may keep playing.
- `dotmatrixboy.channels`: `PulseChannel`, where channel 1 also sweeps
  its frequency, `WaveChannel`, which plays 32 four-bit samples from wave
  RAM, and `NoiseChannel`, which is driven by a linear feedback shift
  register. Each one reads its settings from the sound registers in
  `Memory`. The module also defines the register addresses and bit masks.
- `dotmatrixboy.apu`: `Apu`. Call `clock()` once per CPU cycle. It runs
  the frame sequencer and clocks the four channels. Every 95 cycles it
  takes a stereo sample. The mixed samples go into `master_buffer` and the
  normalised per-channel samples into `ch1_buffer` to `ch4_buffer`.
  `on_write(address, value)` triggers a channel when bit 7 of its control
  register is set.
- `dotmatrixboy.ring_buffer`: `RingBuffer`, a fixed-capacity queue of
  floats. When it is full it overwrites the oldest entry. `read()` returns
  `0.0` when the buffer is empty.
- `dotmatrixboy.app_state`: `AppState`, a dataclass that holds the
  window toggles, the pause and boot-ROM flags, and the list of recently
  opened ROMs. It has three methods:
  - `load(path)` reads the settings from a JSON file. A missing file
    gives the defaults.
  - `save(path)` writes the settings back to that file.
  - `add_recent_rom(path)` adds a ROM path to the recent list.
- `dotmatrixboy.cpu_tests`: reads single-instruction CPU test cases from
  JSON files with `load_tests` or `parse_test`. `find_mismatches` compares
  a CPU's registers and memory with a test's expected final state and
  returns one message for each difference.
- `dotmatrixboy.theme`: the interface style values (`STYLE`) and the
  colour table (`style_colors()`). It also has `rgb_to_vec4`, the
  `Rgb` and `DisplayPalette` dataclasses, and `palette(PaletteType...)`
  for the dot-matrix and pocket palettes.
- `dotmatrixboy.graphics`: `lcd_to_rgba` turns a 160×144 frame of colour
  ids into RGBA bytes. `decode_tiles` renders all 384 VRAM tiles as a
  128×192 RGBA sheet through the background palette. `tile_uv` and
  `oam_tile_uv` give the texture coordinates of a tile on that sheet.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dotmatrixboy.memory import Memory
from dotmatrixboy.apu import Apu

chunks = []
memory = Memory()
apu = Apu(memory, sink=chunks.append)

memory.write(0xFF26, 0x80)   # NR52: sound on
memory.write(0xFF12, 0xF0)   # channel 1 at full volume, no envelope
memory.write(0xFF14, 0x87)   # trigger channel 1
apu.on_write(0xFF14, 0x87)

for _ in range(10_000):
    apu.clock()

print(apu.ch1_buffer[:8])
```

When the master buffer reaches `flush_size` samples (4096 by default),
`Apu` passes a copy of it to `sink` and then clears all of its buffers.

The recent-ROM list keeps the most recent entry first, holds no
duplicates and has at most ten entries:

```python
from dotmatrixboy.app_state import AppState

state = AppState.load("Config.json")
state.add_recent_rom("roms/tetris.gb")
state.save("Config.json")
```

## What it does not do

- It does not emulate a CPU, a pixel-processing unit, timers or
  cartridges. `cpu_tests` only checks the results of a CPU that you
  supply.
- It plays no sound. Audio samples go only to the `sink` callable you
  give `Apu`.
- It opens no window and draws nothing. `graphics` and `theme` return
  pixel bytes, coordinates and colour values for some other program to
  display.
- There is no command-line program and no user interface.