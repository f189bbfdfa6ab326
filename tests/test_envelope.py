from dotmatrixboy.envelope import MAX_VOLUME, Envelope


def test_zero_ticks_leaves_volume_alone():
    envelope = Envelope()
    envelope.set_envelope(0, 7, False)
    for _ in range(20):
        envelope.clock()
    assert envelope.volume == 7


def test_decreasing_stops_at_zero():
    envelope = Envelope()
    envelope.set_envelope(1, 5, False)
    volumes = []
    for _ in range(8):
        envelope.clock()
        volumes.append(envelope.volume)
    assert volumes == sorted(volumes, reverse=True)
    assert volumes[-1] == 0
    assert min(volumes) == 0


def test_increasing_stops_at_max():
    envelope = Envelope()
    envelope.set_envelope(1, 12, True)
    for _ in range(10):
        envelope.clock()
    assert envelope.volume == MAX_VOLUME


def test_volume_changes_only_every_period():
    envelope = Envelope()
    envelope.set_envelope(3, 10, False)
    volumes = []
    for _ in range(9):
        envelope.clock()
        volumes.append(envelope.volume)
    changes = [i for i in range(1, len(volumes)) if volumes[i] != volumes[i - 1]]
    assert all(b - a == 3 for a, b in zip(changes, changes[1:]))
    assert volumes[0] == 10
    assert volumes[2] == 9