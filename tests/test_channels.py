import pytest

from dotmatrixboy.channels import (
    DUTY_CYCLES,
    LENGTH_ENABLE,
    NR10_CH1_SWEEP,
    NR11_CH1_LENGTH_DUTY,
    NR12_CH1_ENVELOPE,
    NR13_CH1_PERIOD_LOW,
    NR14_CH1_PERIOD_HIGH,
    NR24_CH2_PERIOD_HIGH,
    NR31_CH3_LENGTH,
    NR32_CH3_OUTPUT_LEVEL,
    NR33_CH3_PERIOD_LOW,
    NR34_CH3_PERIOD_HIGH,
    NR41_CH4_LENGTH,
    NR42_CH4_ENVELOPE,
    NR43_CH4_FREQ_RANDOM,
    NR52_CH1_ON,
    NR52_CH2_ON,
    NR52_CH3_ON,
    NR52_CH4_ON,
    NR52_SOUND_TOGGLE,
    WAVE_RAM_START,
    NoiseChannel,
    PulseChannel,
    WaveChannel,
)
from dotmatrixboy.memory import Memory


def _pulse_memory(duty=0, frequency=0x7FF, high_extra=0):
    memory = Memory()
    memory.write(NR11_CH1_LENGTH_DUTY, duty << 6)
    memory.write(NR12_CH1_ENVELOPE, 0xF0)
    memory.write(NR13_CH1_PERIOD_LOW, frequency & 0xFF)
    memory.write(NR14_CH1_PERIOD_HIGH, ((frequency >> 8) & 0x7) | high_extra)
    return memory


def _read_ch1_frequency(memory):
    return ((memory.read(NR14_CH1_PERIOD_HIGH) & 0x7) << 8) | memory.read(NR13_CH1_PERIOD_LOW)


def _pulse_period(channel):
    samples = []
    for _ in range(8):
        for _ in range(4):
            channel.clock()
        samples.append(channel.current_sample)
    return samples


def test_pulse_trigger_sets_status_bit():
    memory = _pulse_memory()
    channel = PulseChannel(memory, True)
    channel.trigger()
    assert memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH1_ON)
    assert not memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH2_ON)
    assert channel.active


def test_pulse_duty_waveform():
    channel = PulseChannel(_pulse_memory(duty=2), True)
    channel.trigger()
    assert _pulse_period(channel) == [0, 0, 0, 0, 15, 15, 15, 15]


def test_pulse_length_expiry_clears_status_bit():
    memory = _pulse_memory(high_extra=LENGTH_ENABLE)
    memory.write(NR11_CH1_LENGTH_DUTY, 0x3F)
    channel = PulseChannel(memory, True)
    channel.trigger()
    channel.length_clock()
    assert not channel.active
    assert not memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH1_ON)


def test_pulse_sweep_increases_frequency():
    memory = _pulse_memory(frequency=0x100)
    memory.write(NR10_CH1_SWEEP, 0x11)
    channel = PulseChannel(memory, True)
    channel.trigger()
    channel.sweep_clock()
    assert _read_ch1_frequency(memory) == 0x100 + (0x100 >> 1)
    assert channel.active


def test_pulse_sweep_overflow_silences_channel():
    memory = _pulse_memory(frequency=2000)
    memory.write(NR10_CH1_SWEEP, 0x10)
    channel = PulseChannel(memory, True)
    channel.trigger()
    channel.sweep_clock()
    assert not channel.active
    assert _read_ch1_frequency(memory) == 2000
    assert set(_pulse_period(channel)) == {0}


def test_channel2_has_no_sweep():
    memory = Memory()
    memory.write(NR10_CH1_SWEEP, 0x11)
    memory.write(0xFF18, 0x00)
    memory.write(NR24_CH2_PERIOD_HIGH, 0x01)
    channel = PulseChannel(memory, False)
    channel.trigger()
    channel.sweep_clock()
    assert memory.read(NR24_CH2_PERIOD_HIGH) & 0x7 == 0x01
    assert memory.read(0xFF18) == 0x00


def _noise_samples(noise_register, count):
    memory = Memory()
    memory.write(NR42_CH4_ENVELOPE, 0xF0)
    memory.write(NR43_CH4_FREQ_RANDOM, noise_register)
    channel = NoiseChannel(memory)
    channel.trigger()
    samples = [channel.current_sample]
    while len(samples) < count:
        for _ in range(8):
            channel.clock()
        samples.append(channel.current_sample)
    return memory, samples


def test_noise_trigger_sets_status_bit_and_levels():
    memory, samples = _noise_samples(0x00, 300)
    assert memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH4_ON)
    assert set(samples) == {0, 15}


def test_noise_short_mode_repeats_every_127_steps():
    _, samples = _noise_samples(0x08, 254)
    assert samples[:127] == samples[127:254]


def test_noise_long_mode_does_not_repeat_at_127():
    _, samples = _noise_samples(0x00, 254)
    assert samples[:127] != samples[127:254]


def test_noise_length_expiry_silences_channel():
    memory = Memory()
    memory.write(NR42_CH4_ENVELOPE, 0xFF)
    memory.write(NR41_CH4_LENGTH, LENGTH_ENABLE)
    channel = NoiseChannel(memory)
    channel.trigger()
    channel.length_clock()
    assert not channel.active
    assert not memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH4_ON)
    for _ in range(64):
        channel.clock()
    assert channel.current_sample == 0


def _wave_memory(level_bits):
    memory = Memory()
    memory.write(WAVE_RAM_START, 0xAB)
    memory.write(NR32_CH3_OUTPUT_LEVEL, level_bits)
    memory.write(NR33_CH3_PERIOD_LOW, 0xFF)
    memory.write(NR34_CH3_PERIOD_HIGH, 0x07)
    return memory


def test_wave_plays_nibbles_in_order():
    memory = _wave_memory(0x20)
    channel = WaveChannel(memory)
    channel.start()
    assert memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH3_ON)
    assert channel.current_sample == 0xA
    channel.clock()
    channel.clock()
    assert channel.current_sample == 0xB


def test_wave_half_level_shifts_sample():
    channel = WaveChannel(_wave_memory(0x40))
    channel.start()
    assert channel.current_sample == 0xA >> 1


def test_wave_mute_is_silent():
    channel = WaveChannel(_wave_memory(0x00))
    channel.start()
    assert channel.current_sample == 0


def test_wave_trigger_without_start_is_silent():
    channel = WaveChannel(_wave_memory(0x20))
    channel.trigger()
    assert channel.current_sample == 0


def test_wave_stop_silences_output():
    channel = WaveChannel(_wave_memory(0x20))
    channel.start()
    channel.stop()
    channel.clock()
    channel.clock()
    assert channel.current_sample == 0
    assert not channel.active


def test_wave_length_expiry_clears_status_bit():
    memory = _wave_memory(0x20)
    memory.write(NR31_CH3_LENGTH, 0xFF)
    memory.write(NR34_CH3_PERIOD_HIGH, 0x07 | LENGTH_ENABLE)
    channel = WaveChannel(memory)
    channel.start()
    channel.length_clock()
    assert not channel.active
    assert not memory.read_register_bit(NR52_SOUND_TOGGLE, NR52_CH3_ON)