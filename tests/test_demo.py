from triengine.demo import _parse_args, _title


def test_title_format():
    assert _title(60) == "3D Endgine. FPS: 60"


def test_default_assets():
    args = _parse_args([])
    assert args.obj == "assets/objs/PLATFORM.obj"
    assert args.sound == "assets/wavs/ding.wav"


def test_override_assets():
    args = _parse_args(["--sprite", "hud.bmp"])
    assert args.sprite == "hud.bmp"