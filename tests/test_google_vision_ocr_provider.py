"""Tests for Google Vision OCR provider parsing."""

from types import SimpleNamespace

import pytest
from PIL import Image

from wine_lens.exceptions import AuthenticationError, RateLimitError
from wine_lens.providers.google_vision_ocr import GoogleVisionOCRProvider

SPACE = 1
EOL_SURE_SPACE = 3
HYPHEN = 4
LINE_BREAK = 5


def _symbol(ch, break_type=0):
    detected = SimpleNamespace(type_=break_type) if break_type else None
    return SimpleNamespace(text=ch, property=SimpleNamespace(detected_break=detected))


def _word(text, box, break_type=SPACE):
    left, top, right, bottom = box
    symbols = [_symbol(ch) for ch in text[:-1]] + [_symbol(text[-1], break_type)]
    vertices = [
        SimpleNamespace(x=left, y=top),
        SimpleNamespace(x=right, y=top),
        SimpleNamespace(x=right, y=bottom),
        SimpleNamespace(x=left, y=bottom),
    ]
    return SimpleNamespace(symbols=symbols, bounding_box=SimpleNamespace(vertices=vertices))


def _document(*paragraphs, text=""):
    blocks = [SimpleNamespace(paragraphs=[SimpleNamespace(words=list(words)) for words in paragraphs])]
    return SimpleNamespace(text=text, pages=[SimpleNamespace(blocks=blocks)])


class MockOCRClient:
    def __init__(self, response):
        self.response = response
        self.calls = 0

    def document_text_detection(self, image):
        self.calls += 1
        return self.response


def _image():
    return Image.new("RGB", (20, 20), color="white")


def test_recognize_builds_lines_with_boxes():
    document = _document(
        [
            _word("Origem", (10, 100, 70, 120)),
            _word("Merlot", (80, 100, 140, 120), EOL_SURE_SPACE),
            _word("$45", (400, 102, 440, 121), LINE_BREAK),
        ],
        text="Origem Merlot\n$45\n",
    )
    client = MockOCRClient(SimpleNamespace(full_text_annotation=document, error=SimpleNamespace(message="")))
    provider = GoogleVisionOCRProvider(client=client)

    result = provider.recognize(_image())

    assert [line.text for line in result.lines] == ["Origem Merlot", "$45"]
    assert result.lines[0].box.left == 10
    assert result.lines[0].box.right == 140
    assert result.lines[1].box.top == 102
    assert result.full_text == "Origem Merlot\n$45"
    assert result.image_width == 20
    assert provider.get_recognition_metadata() == {"provider": "ocr", "layout": "document"}


def test_hyphen_break_ends_line_with_hyphen():
    document = _document([_word("Châteauneuf", (0, 0, 100, 20), HYPHEN), _word("du-Pape", (0, 25, 80, 45), LINE_BREAK)])
    client = MockOCRClient(SimpleNamespace(full_text_annotation=document, error=None))

    result = GoogleVisionOCRProvider(client=client).recognize(_image())

    assert [line.text for line in result.lines] == ["Châteauneuf-", "du-Pape"]


def test_falls_back_to_text_annotations():
    response = SimpleNamespace(
        full_text_annotation=None,
        text_annotations=[SimpleNamespace(description="RED WINES\nOrigem Merlot 2019 $45\n")],
        error=SimpleNamespace(message=""),
    )
    provider = GoogleVisionOCRProvider(client=MockOCRClient(response))

    result = provider.recognize(_image())

    assert result.full_text == "RED WINES\nOrigem Merlot 2019 $45"
    assert [line.text for line in result.lines] == ["RED WINES", "Origem Merlot 2019 $45"]
    assert all(line.box is None for line in result.lines)
    assert provider.get_recognition_metadata()["layout"] == "text"


@pytest.mark.parametrize(
    ("message", "error"),
    [("Quota exceeded for project", RateLimitError), ("Permission denied on resource", AuthenticationError)],
)
def test_response_errors_are_mapped(message, error):
    response = SimpleNamespace(full_text_annotation=None, text_annotations=[], error=SimpleNamespace(message=message))
    provider = GoogleVisionOCRProvider(client=MockOCRClient(response))

    with pytest.raises(error):
        provider.recognize(_image())


def test_client_exceptions_are_mapped():
    class BrokenClient:
        def document_text_detection(self, image):
            raise RuntimeError("rate limited, retry later")

    with pytest.raises(RateLimitError):
        GoogleVisionOCRProvider(client=BrokenClient()).recognize(_image())
