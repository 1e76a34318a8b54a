from PIL import Image

from zombie_replay.renderer.canvas import Canvas, prepare_canvas


def test_prepare_canvas_resizes_and_resets_alpha() -> None:
    canvas = Canvas(4, 4)
    canvas.global_alpha = 0.3
    prepared = prepare_canvas(canvas, 10, 6)
    assert prepared is canvas
    assert canvas.image.size == (10, 6)
    assert canvas.global_alpha == 1.0


def test_fill_rect_rounds_and_clips() -> None:
    canvas = Canvas(10, 10)
    canvas.fill_rect("#F00", -3.4, 8.6, 5, 5)

    assert canvas.image.getpixel((0, 9)) == (255, 0, 0, 255)
    assert canvas.image.getpixel((2, 9))[3] == 0
    assert canvas.image.getpixel((0, 8))[3] == 0


def test_paint_entirely_off_surface_is_ignored() -> None:
    canvas = Canvas(10, 10)
    canvas.fill_rect("#FFF", 40, 40, 5, 5)
    canvas.draw_image(Image.new("RGBA", (4, 4), (1, 2, 3, 255)), -20, 0, 4, 4)
    assert canvas.image.getbbox() is None


def test_draw_image_scales_to_target_size() -> None:
    canvas = Canvas(8, 8)
    canvas.draw_image(Image.new("RGBA", (2, 2), (0, 255, 0, 255)), 2, 2, 4, 4)

    assert canvas.image.getbbox() == (2, 2, 6, 6)


def test_global_alpha_modulates_paint() -> None:
    canvas = Canvas(4, 4)
    canvas.global_alpha = 0.5
    canvas.fill_rect("#00F", 0, 0, 4, 4)

    assert canvas.image.getpixel((1, 1)) == (0, 0, 255, 128)


def test_clear_and_snapshot_are_independent() -> None:
    canvas = Canvas(4, 4)
    canvas.fill_rect("#FFF", 0, 0, 4, 4)
    snapshot = canvas.to_image()
    canvas.clear()

    assert canvas.image.getbbox() is None
    assert snapshot.getpixel((0, 0)) == (255, 255, 255, 255)


def test_fill_text_draws_above_baseline() -> None:
    canvas = Canvas(80, 40)
    canvas.fill_text("hi", 2, 30, "#FFF", 18)

    bbox = canvas.image.getbbox()
    assert bbox is not None
    assert bbox[3] <= 31
