import pytest

from prefixline.keys import Key, KeyDecoder, KeyEvent


def decode_all(text: str) -> list[KeyEvent]:
    """Decode every key in `text`."""
    characters = list(text)
    decoder = KeyDecoder(lambda: characters.pop(0) if characters else "")
    events: list[KeyEvent] = []
    while characters:
        events.append(decoder())
    return events


class TestCharacters:
    def test_printable(self):
        assert decode_all("hi") == [
            KeyEvent(Key.CHARACTER, "h"),
            KeyEvent(Key.CHARACTER, "i"),
        ]

    def test_space(self):
        assert decode_all(" ") == [KeyEvent(Key.CHARACTER, " ")]

    def test_unicode(self):
        assert decode_all("é日") == [
            KeyEvent(Key.CHARACTER, "é"),
            KeyEvent(Key.CHARACTER, "日"),
        ]


class TestControlKeys:
    @pytest.mark.parametrize(
        "text, key",
        [
            ("\r", Key.ENTER),
            ("\n", Key.ENTER),
            ("\x7f", Key.BACKSPACE),
            ("\x08", Key.WORD_BACKSPACE),
            ("\x17", Key.WORD_BACKSPACE),
            ("\x1b\x7f", Key.WORD_BACKSPACE),
            ("\t", Key.TAB),
            ("\x01", Key.IGNORED),
        ],
    )
    def test_key(self, text, key):
        assert decode_all(text) == [KeyEvent(key)]

    def test_interrupt(self):
        assert decode_all("a\x03") == [
            KeyEvent(Key.CHARACTER, "a"),
            KeyEvent(Key.INTERRUPT),
        ]

    def test_end_of_input_interrupts(self):
        decoder = KeyDecoder(lambda: "")
        assert decoder() == KeyEvent(Key.INTERRUPT)


class TestEscapeSequences:
    def test_arrow_keys_ignored(self):
        assert decode_all("\x1b[D\x1b[Ca") == [
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.CHARACTER, "a"),
        ]

    def test_parameters_consumed(self):
        assert decode_all("\x1b[1;5Dx") == [
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.CHARACTER, "x"),
        ]

    def test_ss3(self):
        assert decode_all("\x1bOHx") == [
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.CHARACTER, "x"),
        ]

    def test_alt_character_ignored(self):
        assert decode_all("\x1bbc") == [
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.CHARACTER, "c"),
        ]

    def test_double_escape_sequence(self):
        assert decode_all("\x1b\x1b[Dx") == [
            KeyEvent(Key.IGNORED),
            KeyEvent(Key.CHARACTER, "x"),
        ]

    @pytest.mark.parametrize(
        "text, key",
        [
            ("\x1b\x03", Key.INTERRUPT),
            ("\x1b\r", Key.ENTER),
            ("\x1b\t", Key.TAB),
            ("\x1b\x08", Key.WORD_BACKSPACE),
        ],
    )
    def test_escape_then_control_key(self, text, key):
        assert decode_all(f"a{text}") == [
            KeyEvent(Key.CHARACTER, "a"),
            KeyEvent(key),
        ]
