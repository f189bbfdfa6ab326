"""The pulse, wave and noise sound channels of the audio unit."""

from __future__ import annotations

from enum import IntEnum

from dotmatrixboy.envelope import Envelope
from dotmatrixboy.length import LengthCounter
from dotmatrixboy.memory import Memory

# Sound registers
NR10_CH1_SWEEP = 0xFF10
NR11_CH1_LENGTH_DUTY = 0xFF11
NR12_CH1_ENVELOPE = 0xFF12
NR13_CH1_PERIOD_LOW = 0xFF13
NR14_CH1_PERIOD_HIGH = 0xFF14
NR21_CH2_LENGTH_DUTY = 0xFF16
NR22_CH2_ENVELOPE = 0xFF17
NR23_CH2_PERIOD_LOW = 0xFF18
NR24_CH2_PERIOD_HIGH = 0xFF19
NR30_CH3_DAC_ENABLE = 0xFF1A
NR31_CH3_LENGTH = 0xFF1B
NR32_CH3_OUTPUT_LEVEL = 0xFF1C
NR33_CH3_PERIOD_LOW = 0xFF1D
NR34_CH3_PERIOD_HIGH = 0xFF1E
NR41_CH4_LENGTH = 0xFF20
NR42_CH4_ENVELOPE = 0xFF21
NR43_CH4_FREQ_RANDOM = 0xFF22
NR44_CH4_CONTROL = 0xFF23
NR50_MASTER_VOLUME = 0xFF24
NR51_SOUND_PANNING = 0xFF25
NR52_SOUND_TOGGLE = 0xFF26
WAVE_RAM_START = 0xFF30
WAVE_RAM_END = 0xFF3F

# Register bits
NR52_AUDIO_ON = 0x80
NR52_CH1_ON = 0x01
NR52_CH2_ON = 0x02
NR52_CH3_ON = 0x04
NR52_CH4_ON = 0x08
NR30_DAC_ON = 0x80
LENGTH_ENABLE = 0x40
TRIGGER = 0x80

DEFAULT_LENGTH = 64
WAVE_LENGTH = 256
MAX_FREQUENCY = 2047

DUTY_CYCLES = (
    (0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1, 1, 1),
    (0, 1, 1, 1, 1, 1, 1, 0),
)

NOISE_DIVISORS = (8, 16, 32, 48, 64, 80, 96, 112)


class AudioLevel(IntEnum):
    """Wave channel output level selected by NR32."""

    MUTE = 0
    FULL = 1
    HALF = 2
    QUARTER = 3


def _load_envelope(envelope: Envelope, register: int) -> None:
    envelope.set_envelope(register & 0x7, (register & 0xF0) >> 4, bool(register & 0x8))


class PulseChannel:
    """Square-wave channel; channel 1 also has a frequency sweep."""

    def __init__(self, memory: Memory, is_channel1: bool) -> None:
        self._memory = memory
        self._has_sweep = is_channel1
        self._control_flag = NR52_CH1_ON if is_channel1 else NR52_CH2_ON
        self._data_addr = NR14_CH1_PERIOD_HIGH if is_channel1 else NR24_CH2_PERIOD_HIGH
        self._freq_low_addr = NR13_CH1_PERIOD_LOW if is_channel1 else NR23_CH2_PERIOD_LOW
        self._length_duty_addr = NR11_CH1_LENGTH_DUTY if is_channel1 else NR21_CH2_LENGTH_DUTY
        self._envelope_addr = NR12_CH1_ENVELOPE if is_channel1 else NR22_CH2_ENVELOPE
        self._sweep_addr = NR10_CH1_SWEEP if is_channel1 else 0

        self._active = False
        self._current_sample = 0
        self._duty = 0
        self._sample_index = 0
        self._cycles_per_sample = 0
        self._frequency = 0
        self._cycle_count = 0

        self._sweep_shift = 0
        self._sweep_time = 0
        self._elapsed_sweep = 0
        self._sweep_decreasing = False

        self._envelope = Envelope()
        self._length = LengthCounter()

    @property
    def current_sample(self) -> int:
        """The channel's current output level."""
        return self._current_sample

    @property
    def active(self) -> bool:
        """Whether the channel is producing sound."""
        return self._active

    def clock(self) -> None:
        """Advance one CPU cycle."""
        self._cycle_count += 1
        if self._cycle_count >= self._cycles_per_sample:
            self._sample_index = (self._sample_index + 1) % 8
            self._update_sample()
            self._cycle_count -= self._cycles_per_sample

    def length_clock(self) -> None:
        """Advance the length counter, switching the channel off when it expires."""
        self._active = self._length.clock()
        if not self._active:
            self._memory.write_register_bit(NR52_SOUND_TOGGLE, self._control_flag, False)

    def sweep_clock(self) -> None:
        """Advance the frequency sweep."""
        if self._sweep_time == 0:
            return

        if self._elapsed_sweep != self._sweep_time:
            self._elapsed_sweep += 1
        if self._elapsed_sweep != self._sweep_time:
            return

        change = self._frequency >> self._sweep_shift
        if self._sweep_decreasing:
            if change > self._frequency:
                self._elapsed_sweep = 0
                return
            new_frequency = self._frequency - change
        else:
            if self._frequency + change > MAX_FREQUENCY:
                self._active = False
                return
            new_frequency = self._frequency + change

        self._frequency = new_frequency
        self._cycles_per_sample = (2048 - new_frequency) * 4
        self._cycle_count = 0
        self._elapsed_sweep = 0
        self._write_frequency(new_frequency)

    def envelope_clock(self) -> None:
        """Advance the volume envelope."""
        self._envelope.clock()

    def trigger(self) -> None:
        """Restart the channel from its registers."""
        self._active = True
        self._memory.write_register_bit(NR52_SOUND_TOGGLE, self._control_flag, True)

        length_duty = self._memory.read(self._length_duty_addr)
        self._duty = (length_duty & 0xC0) >> 6
        self._length.set_length(
            DEFAULT_LENGTH - (length_duty & 0x3F),
            self._memory.read_register_bit(self._data_addr, LENGTH_ENABLE),
        )
        _load_envelope(self._envelope, self._memory.read(self._envelope_addr))

        self._frequency = self._read_frequency()
        self._cycles_per_sample = (2048 - self._frequency) * 4
        self._cycle_count = 0
        self._sample_index = 0

        if self._has_sweep:
            self._elapsed_sweep = 0
            sweep = self._memory.read(self._sweep_addr)
            self._sweep_time = (sweep & 0x70) >> 4
            self._sweep_decreasing = bool(sweep & 0x8)
            self._sweep_shift = sweep & 0x7

    def _read_frequency(self) -> int:
        high = self._memory.read(self._data_addr) & 0x7
        return (high << 8) | self._memory.read(self._freq_low_addr)

    def _write_frequency(self, frequency: int) -> None:
        data = self._memory.read(self._data_addr)
        self._memory.write(self._data_addr, (data & 0xF8) | ((frequency & 0x700) >> 8))
        self._memory.write(self._freq_low_addr, frequency & 0xFF)

    def _update_sample(self) -> None:
        self._current_sample = 0
        if self._active:
            duty_value = DUTY_CYCLES[self._duty][self._sample_index]
            self._current_sample = duty_value * self._envelope.volume


class NoiseChannel:
    """Pseudo-random noise channel driven by a linear feedback shift register."""

    def __init__(self, memory: Memory) -> None:
        self._memory = memory
        self._active = False
        self._current_sample = 0
        self._width_7bit = False
        self._divisor = 0
        self._lfsr = 0x7FFF
        self._cycles_per_sample = 0
        self._cycle_count = 0
        self._envelope = Envelope()
        self._length = LengthCounter()

    @property
    def current_sample(self) -> int:
        """The channel's current output level."""
        return self._current_sample

    @property
    def active(self) -> bool:
        """Whether the channel is producing sound."""
        return self._active

    def trigger(self) -> None:
        """Restart the channel from its registers."""
        self._active = True
        self._memory.write_register_bit(NR52_SOUND_TOGGLE, NR52_CH4_ON, True)

        envelope = self._memory.read(NR42_CH4_ENVELOPE)
        self._length.set_length(
            DEFAULT_LENGTH - (envelope & 0x3F),
            self._memory.read_register_bit(NR41_CH4_LENGTH, LENGTH_ENABLE),
        )
        _load_envelope(self._envelope, envelope)

        noise = self._memory.read(NR43_CH4_FREQ_RANDOM)
        self._divisor = NOISE_DIVISORS[noise & 0x7]
        self._width_7bit = bool(noise & 0x8)
        self._lfsr = 0x7FFF
        self._cycles_per_sample = (self._divisor << ((noise & 0xF0) >> 4)) & 0xFFFF
        self._cycle_count = 0

        self._update_sample()

    def clock(self) -> None:
        """Advance one CPU cycle."""
        self._cycle_count += 1
        if self._cycle_count >= self._cycles_per_sample:
            self._update_sample()
            self._cycle_count -= self._cycles_per_sample

    def length_clock(self) -> None:
        """Advance the length counter, switching the channel off when it expires."""
        self._active = self._length.clock()
        if not self._active:
            self._memory.write_register_bit(NR52_SOUND_TOGGLE, NR52_CH4_ON, False)

    def envelope_clock(self) -> None:
        """Advance the volume envelope."""
        self._envelope.clock()

    def _update_sample(self) -> None:
        xored = (self._lfsr & 0x1) ^ ((self._lfsr & 0x2) >> 1)
        self._lfsr = (xored << 14) | (self._lfsr >> 1)
        if self._width_7bit:
            self._lfsr = (xored << 6) | (self._lfsr & 0x7FBF)

        bit = 1 if (self._lfsr & 0x1) == 0 else 0
        self._current_sample = bit * self._envelope.volume if self._active else 0


class WaveChannel:
    """Channel that plays 32 four-bit samples from wave RAM."""

    def __init__(self, memory: Memory) -> None:
        self._memory = memory
        self._active = False
        self._running = False
        self._current_sample = 0
        self._sample_index = 0
        self._cycles_per_sample = 0
        self._cycle_count = 0
        self._output_level = AudioLevel.MUTE
        self._length = LengthCounter()

    @property
    def current_sample(self) -> int:
        """The channel's current output level."""
        return self._current_sample

    @property
    def active(self) -> bool:
        """Whether the channel is enabled."""
        return self._active

    def start(self) -> None:
        """Enable and trigger the channel if it is not already on."""
        if not self._active:
            self._active = True
            self.trigger()

    def stop(self) -> None:
        """Switch the channel off."""
        self._active = False
        self._running = False

    def trigger(self) -> None:
        """Restart playback from the channel's registers."""
        self._running = True
        self._memory.write_register_bit(NR52_SOUND_TOGGLE, NR52_CH3_ON, True)

        self._length.set_length(
            WAVE_LENGTH - self._memory.read(NR31_CH3_LENGTH),
            self._memory.read_register_bit(NR34_CH3_PERIOD_HIGH, LENGTH_ENABLE),
        )

        self._cycles_per_sample = (2048 - self._read_frequency()) * 2
        self._cycle_count = 0
        self._sample_index = 0

        level = self._memory.read(NR32_CH3_OUTPUT_LEVEL)
        self._output_level = AudioLevel((level & 0x60) >> 5)

        self._update_sample()

    def length_clock(self) -> None:
        """Advance the length counter, switching the channel off when it expires."""
        self._active = self._length.clock()
        if not self._active:
            self._memory.write_register_bit(NR52_SOUND_TOGGLE, NR52_CH3_ON, False)

    def clock(self) -> None:
        """Advance one CPU cycle."""
        self._cycle_count += 1
        if self._cycle_count >= self._cycles_per_sample:
            self._sample_index = (self._sample_index + 1) % 32
            self._update_sample()
            self._cycle_count -= self._cycles_per_sample

    def _read_frequency(self) -> int:
        high = self._memory.read(NR34_CH3_PERIOD_HIGH) & 0x7
        return (high << 8) | self._memory.read(NR33_CH3_PERIOD_LOW)

    def _update_sample(self) -> None:
        byte = self._memory.read(WAVE_RAM_START + self._sample_index // 2)
        sample = (byte & 0xF0) >> 4 if self._sample_index % 2 == 0 else byte & 0x0F

        if self._output_level != AudioLevel.MUTE:
            sample >>= self._output_level - 1

        if not self._active or not self._running or self._output_level == AudioLevel.MUTE:
            sample = 0
        self._current_sample = sample