import pytest

from groupchat.core.exceptions import InvalidInputError
from groupchat.core.validation import MAX_ID, MAX_OFFSET, PageRequest, is_blank, is_storable_id, require, sanitize


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 20)),
        (0, 0, (1, 1)),
        (-5, -1, (1, 1)),
        (3, 250, (3, 100)),
        (2, 100, (2, 100)),
    ],
)
def test_page_request_clamps(page, limit, expected):
    request = PageRequest.of(page, limit)
    assert (request.page, request.limit) == expected


def test_page_request_offset():
    assert PageRequest.of(3, 10).offset == 20


@pytest.mark.parametrize("total, limit", [(0, 20), (1, 1), (45, 20), (100, 100), (101, 100)])
def test_describe_next_page_matches_total_pages(total, limit):
    for page in range(1, 5):
        info = PageRequest.of(page, limit).describe(total)
        assert info["has_next_page"] == (page < info["total_pages"])
        assert info["has_previous_page"] == (page > 1)
        assert info["total_pages"] == -(-total // limit)


def test_sanitize_escapes_html_characters():
    assert sanitize("Tom & \"Jerry\" <3 'cheese'") == "Tom &amp; &quot;Jerry&quot; &lt;3 &#x27;cheese&#x27;"


def test_blank_values():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t")
    assert not is_blank("x")
    assert not is_blank(7)


def test_require_raises_invalid_input():
    with pytest.raises(InvalidInputError) as excinfo:
        require("", "Username is required")
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Username is required"
    assert require("bob", "Username is required") == "bob"


def test_page_request_offset_stays_within_int64():
    for limit in (1, 20, 100):
        request = PageRequest.of(10**30, limit)
        assert 0 <= request.offset <= MAX_OFFSET


def test_storable_ids():
    assert is_storable_id(1)
    assert is_storable_id(MAX_ID)
    assert not is_storable_id(MAX_ID + 1)
    assert not is_storable_id(2**63)
    assert not is_storable_id(0)
