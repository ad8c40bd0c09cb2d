"""Demo game showing models, sprites and sound."""

from __future__ import annotations

import argparse

from . import engine as engine_module
from .model import Model
from .sound import Sound
from .sprite import Sprite


def _title(fps: int) -> str:
    return f"3D Endgine. FPS: {fps}"


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Run the engine demo.")
    parser.add_argument("--obj", default="assets/objs/PLATFORM.obj")
    parser.add_argument("--texture", default="assets/bmps/PLATFORM.bmp")
    parser.add_argument("--sprite", default="assets/sprites/HUD.bmp")
    parser.add_argument("--sound", default="assets/wavs/ding.wav")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    engine = engine_module.initialize()
    window = engine.window
    window.set_title("Game")

    model = Model(args.obj, args.texture)
    sprite = Sprite(args.sprite)
    Sound(args.sound).play()

    while not window.should_close():
        engine.camera.update()
        window.set_title(_title(window.fps()))
        engine.renderer.update()
        engine.renderer.render_model(model)
        engine.renderer.render_sprite(sprite)
        window.update()

    window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())