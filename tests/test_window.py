from triengine.window import FpsCounter, Key


def test_fps_counts_last_second():
    counter = FpsCounter()
    for t in (0.0, 0.5, 0.9):
        counter.tick(t)
    assert counter.fps(1.2) == 2


def test_fps_empty():
    assert FpsCounter().fps(10.0) == 0


def test_fps_excludes_exactly_one_second_old():
    counter = FpsCounter()
    counter.tick(1.0)
    assert counter.fps(2.0) == 0
    counter.tick(1.5)
    assert counter.fps(2.0) == 1


def test_key_lookup_by_value():
    assert Key("LSHIFT") is Key.LEFT_SHIFT