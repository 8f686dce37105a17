import random
import string

import pytest

from app.services.video_id import extract_video_id

ID_ALPHABET = string.ascii_letters + string.digits + "-_"

URL_SHAPES = [
    "https://www.youtube.com/watch?v={id}",
    "https://youtube.com/watch?v={id}&t=42s",
    "http://m.youtube.com/watch?v={id}#comments",
    "https://www.youtube.com/watch?feature=share&v={id}",
    "www.youtube.com/watch?v={id}&list=PL1234567890",
    "https://youtu.be/{id}",
    "https://youtu.be/{id}?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/embed/{id}?autoplay=1",
    "https://www.youtube-nocookie.com/embed/{id}",
    "https://www.youtube.com/shorts/{id}",
    "https://www.youtube.com/live/{id}?feature=shared",
    "https://www.youtube.com/v/{id}",
    "  https://youtu.be/{id}  ",
]


def _random_ids(count, seed=1234):
    rng = random.Random(seed)
    return ["".join(rng.choice(ID_ALPHABET) for _ in range(11)) for _ in range(count)]


def test_extracts_id_from_watch_url():
    assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"


@pytest.mark.parametrize("shape", URL_SHAPES)
@pytest.mark.parametrize("video_id", _random_ids(20))
def test_every_url_shape_round_trips(shape, video_id):
    assert extract_video_id(shape.format(id=video_id)) == video_id


@pytest.mark.parametrize("video_id", _random_ids(10, seed=99) + ["dQw4w9WgXcQ", "___________"])
def test_bare_id_is_accepted(video_id):
    assert extract_video_id(video_id) == video_id


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "not a url",
        "dQw4w9WgXc",  # 10 chars
        "dQw4w9WgXcQQ",  # 12 chars
        "dQw4w9WgXc!",
        "https://vimeo.com/123456789",
        "https://www.youtube.com/watch?v=short",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQextra",
        "https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
        "https://example.com/?v=dQw4w9WgXcQ",
    ],
)
def test_unrecognized_input_returns_none(value):
    assert extract_video_id(value) is None


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=AAAAAAAAAAA&v=BBBBBBBBBBB",
        "https://www.youtube.com/watch?feature=share&v=AAAAAAAAAAA&t=5&v=BBBBBBBBBBB",
        "https://www.youtube.com/watch?list=PL1&v=AAAAAAAAAAA&v=BBBBBBBBBBB&index=2",
    ],
)
def test_first_v_param_wins(url):
    assert extract_video_id(url) == "AAAAAAAAAAA"
