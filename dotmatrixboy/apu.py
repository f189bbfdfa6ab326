"""Audio processing unit: mixes the four sound channels into sample buffers."""

from __future__ import annotations

from typing import Callable, Optional

from dotmatrixboy.channels import (
    NR14_CH1_PERIOD_HIGH,
    NR24_CH2_PERIOD_HIGH,
    NR30_CH3_DAC_ENABLE,
    NR30_DAC_ON,
    NR34_CH3_PERIOD_HIGH,
    NR44_CH4_CONTROL,
    NR52_AUDIO_ON,
    NR52_CH1_ON,
    NR52_CH2_ON,
    NR52_CH3_ON,
    NR52_CH4_ON,
    NR52_SOUND_TOGGLE,
    TRIGGER,
    NoiseChannel,
    PulseChannel,
    WaveChannel,
)
from dotmatrixboy.memory import Memory

FRAME_SEQUENCER_PERIOD = 8192
CYCLES_PER_SAMPLE = 95
FLUSH_SIZE = 4096

SampleSink = Callable[[list], None]


class Apu:
    """Clocks the sound channels and collects stereo samples.

    Every ``flush_size`` master samples the buffer is handed to ``sink``
    (when one is given) and all buffers are cleared.
    """

    def __init__(
        self,
        memory: Memory,
        sink: Optional[SampleSink] = None,
        flush_size: int = FLUSH_SIZE,
    ) -> None:
        if flush_size < 1:
            raise ValueError("flush_size must be positive")
        self._memory = memory
        self._sink = sink
        self._flush_size = flush_size

        self.channel1 = PulseChannel(memory, True)
        self.channel2 = PulseChannel(memory, False)
        self.channel3 = WaveChannel(memory)
        self.channel4 = NoiseChannel(memory)

        self._cycle_count = 0
        self._frame_step = 0
        self._frame_countdown = FRAME_SEQUENCER_PERIOD
        self._max_sample = 0.0

        self._master: list[float] = []
        self._ch1: list[float] = []
        self._ch2: list[float] = []
        self._ch3: list[float] = []
        self._ch4: list[float] = []

    @property
    def master_buffer(self) -> list[float]:
        """Mixed stereo samples not yet flushed, left and right interleaved."""
        return list(self._master)

    @property
    def ch1_buffer(self) -> list[float]:
        """Normalised samples of channel 1."""
        return list(self._ch1)

    @property
    def ch2_buffer(self) -> list[float]:
        """Normalised samples of channel 2."""
        return list(self._ch2)

    @property
    def ch3_buffer(self) -> list[float]:
        """Normalised samples of channel 3."""
        return list(self._ch3)

    @property
    def ch4_buffer(self) -> list[float]:
        """Normalised samples of channel 4."""
        return list(self._ch4)

    def clock(self) -> None:
        """Advance the audio unit by one CPU cycle."""
        self._cycle_count += 1
        memory = self._memory

        if not memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_AUDIO_ON):
            return

        if memory.read_register_bit(NR30_CH3_DAC_ENABLE, NR30_DAC_ON):
            self.channel3.start()
        else:
            self.channel3.stop()

        self._frame_countdown -= 1
        if self._frame_countdown <= 0:
            self._frame_countdown = FRAME_SEQUENCER_PERIOD
            self._step_frame_sequencer()

        self.channel1.clock()
        self.channel2.clock()
        self.channel3.clock()
        self.channel4.clock()

        if self._cycle_count >= CYCLES_PER_SAMPLE:
            self._take_sample()
            self._cycle_count = 0

        if len(self._master) >= self._flush_size:
            if self._sink is not None:
                self._sink(list(self._master))
            for buffer in (self._ch1, self._ch2, self._ch3, self._ch4, self._master):
                buffer.clear()

    def on_write(self, address: int, value: int) -> None:
        """React to a register write, triggering a channel when asked to."""
        triggers = (
            (NR14_CH1_PERIOD_HIGH, self.channel1),
            (NR24_CH2_PERIOD_HIGH, self.channel2),
            (NR34_CH3_PERIOD_HIGH, self.channel3),
            (NR44_CH4_CONTROL, self.channel4),
        )
        for register, channel in triggers:
            if address == register and self._memory.read_register_bit(register, TRIGGER):
                channel.trigger()

    def _step_frame_sequencer(self) -> None:
        step = self._frame_step
        if step in (2, 6):
            self.channel1.sweep_clock()
        if step % 2 == 0:
            self.channel1.length_clock()
            self.channel2.length_clock()
            self.channel3.length_clock()
            self.channel4.length_clock()
        elif step == 7:
            self.channel1.envelope_clock()
            self.channel2.envelope_clock()
            self.channel4.envelope_clock()
        self._frame_step = (step + 1) % 8

    def _take_sample(self) -> None:
        memory = self._memory
        pairs = (
            (NR52_CH1_ON, self.channel1, self._ch1),
            (NR52_CH2_ON, self.channel2, self._ch2),
            (NR52_CH3_ON, self.channel3, self._ch3),
            (NR52_CH4_ON, self.channel4, self._ch4),
        )
        total = 0.0
        for flag, channel, buffer in pairs:
            on = memory.read_register_bit(NR52_SOUND_TOGGLE, flag)
            sample = float(channel.current_sample) if on else 0.0
            normalised = self._normalize(sample)
            buffer.append(normalised)
            buffer.append(normalised)
            total += sample

        combined = total / 4
        self._master.append(combined / 8)
        self._master.append(combined / 8)

    def _normalize(self, sample: float) -> float:
        if sample > self._max_sample:
            self._max_sample = sample
        if self._max_sample == 0:
            return 0.0
        return sample / self._max_sample