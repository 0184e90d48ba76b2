"""Tests for the bitmap font and scroll frames."""

from launchgames.games.glyphs import (
    BLANK_COLUMN,
    FONT,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    scroll_frames,
    text_columns,
)


class TestFont:
    """Test glyph shapes."""

    def test_all_glyphs_are_3x5(self):
        for ch, columns in FONT.items():
            assert len(columns) == GLYPH_WIDTH, ch
            assert all(len(column) == GLYPH_HEIGHT for column in columns), ch

    def test_letters_and_digits_present(self):
        for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 ":
            assert ch in FONT

    def test_t_shape(self):
        """Columns are listed top pixel first."""
        left, middle, right = FONT["T"]
        assert left == (True, False, False, False, False)
        assert middle == (True,) * 5
        assert right == left

    def test_space_is_blank(self):
        assert FONT[" "] == [BLANK_COLUMN] * 3


class TestTextColumns:
    """Test laying text out as columns."""

    def test_glyph_plus_spacer(self):
        columns = text_columns("A")
        assert len(columns) == 4
        assert columns[:3] == FONT["A"]
        assert columns[3] == BLANK_COLUMN

    def test_lowercase_uses_uppercase_glyphs(self):
        assert text_columns("tic") == text_columns("TIC")

    def test_unknown_characters_skipped(self):
        assert text_columns("?") == []
        assert text_columns("A?B") == text_columns("AB")

    def test_title_width(self):
        assert len(text_columns("TIC TAC TOE")) == 44


class TestScrollFrames:
    """Test the scrolling viewport."""

    def test_frame_count(self):
        assert len(scroll_frames("A")) == 4 + 9
        assert len(scroll_frames("TIC TAC TOE")) == 53

    def test_frames_are_viewport_wide(self):
        assert all(len(frame) == 8 for frame in scroll_frames("HELLO"))

    def test_first_and_last_frames_blank(self):
        frames = scroll_frames("HI")
        assert frames[0] == [BLANK_COLUMN] * 8
        assert frames[-1] == [BLANK_COLUMN] * 8

    def test_text_enters_from_the_right(self):
        frames = scroll_frames("T")
        assert frames[1][7] == FONT["T"][0]
        assert frames[1][:7] == [BLANK_COLUMN] * 7

    def test_empty_text(self):
        frames = scroll_frames("")
        assert len(frames) == 9
        assert all(frame == [BLANK_COLUMN] * 8 for frame in frames)

    def test_custom_width(self):
        frames = scroll_frames("A", width=4)
        assert len(frames) == 4 + 5
        assert all(len(frame) == 4 for frame in frames)
