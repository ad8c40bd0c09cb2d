from triengine.text import GLYPH_SIZE, Text, glyph_quads


def test_one_quad_per_character():
    assert len(glyph_quads("hello")) == 5


def test_empty_text_has_no_quads():
    assert glyph_quads("") == []


def test_first_quad_at_origin():
    quad = glyph_quads("a")[0]
    assert quad.top_left == (0, 0)
    assert quad.bottom_right == (32, 32)


def test_quads_advance_by_glyph_size():
    quads = glyph_quads("abc")
    for previous, current in zip(quads, quads[1:]):
        assert current.top_left[0] - previous.top_left[0] == GLYPH_SIZE
        assert current.top_left == previous.top_right


def test_quads_are_squares():
    for quad in glyph_quads("xyz"):
        assert quad.top_right[0] - quad.top_left[0] == GLYPH_SIZE
        assert quad.bottom_left[1] - quad.top_left[1] == GLYPH_SIZE
        assert quad.bottom_right == (quad.top_right[0], quad.bottom_left[1])


def test_text_keeps_position_and_layout():
    text = Text("hi", 5, 7)
    assert (text.pos_x, text.pos_y) == (5, 7)
    assert text.text == "hi"
    assert text.quads == glyph_quads("hi")