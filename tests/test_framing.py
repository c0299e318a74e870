import pytest

from gostudy.framing import FrameDecoder, encode

MESSAGE = "Hello world,hello xiaomotong!"


def test_encode_wire_format():
    assert encode("abc") == b"\x03\x00abc"


def test_encode_prefix_matches_payload_length():
    frame = encode(MESSAGE)
    assert int.from_bytes(frame[:2], "little") == len(MESSAGE)
    assert frame[2:] == MESSAGE.encode()


def test_thirty_concatenated_frames_decode_separately():
    stream = b"".join(encode(MESSAGE) for _ in range(30))
    decoder = FrameDecoder()
    assert decoder.feed(stream) == [MESSAGE] * 30
    assert decoder.pending == 0


def test_byte_by_byte_feeding():
    stream = encode("one") + encode("two")
    decoder = FrameDecoder()
    received = []
    for byte in stream:
        received.extend(decoder.feed(bytes([byte])))
    assert received == ["one", "two"]
    assert decoder.pending == 0


def test_partial_frame_waits_for_more_data():
    frame = encode(MESSAGE)
    decoder = FrameDecoder()
    assert decoder.feed(frame[:5]) == []
    assert decoder.pending == 5
    assert decoder.feed(frame[5:]) == [MESSAGE]


@pytest.mark.parametrize("text", ["", "中文消息", "x" * 32767])
def test_round_trip(text):
    assert FrameDecoder().feed(encode(text)) == [text]


def test_oversized_message_rejected():
    with pytest.raises(ValueError):
        encode("x" * 32768)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        FrameDecoder().feed(b"\xff\xff")