"""Tests for content type validation."""

import pytest

from fserver.apps.files.exceptions import InvalidFileFormatError
from fserver.apps.files.logic.validation import (
    ACCEPTED_CONTENT_TYPES,
    ensure_accepted,
    find_rejected,
    is_accepted,
)


@pytest.mark.parametrize('content_type', ['image/jpeg', 'image/png', 'image/jpg'])
def test_is_accepted_whitelist(content_type):
    """Test every whitelisted type is accepted."""
    assert is_accepted(content_type)


@pytest.mark.parametrize('content_type', [
    'text/plain',
    'image/gif',
    'application/pdf',
    'IMAGE/PNG',
    'image/png; charset=binary',
    '',
])
def test_is_accepted_rejects_others(content_type):
    """Test types outside the whitelist are rejected, compared exactly."""
    assert not is_accepted(content_type)


def test_ensure_accepted_raises_with_offending_type(make_content):
    """Test single upload rejection carries type and whitelist."""
    content = make_content(filename='b.txt', content_type='text/plain')

    with pytest.raises(InvalidFileFormatError) as exc_info:
        ensure_accepted(content)

    assert exc_info.value.content_type == 'text/plain'
    assert exc_info.value.accepted == ACCEPTED_CONTENT_TYPES
    assert 'text/plain' in exc_info.value.message


def test_ensure_accepted_passes_image(make_content):
    """Test accepted upload does not raise."""
    ensure_accepted(make_content(filename='c.jpg', content_type='image/jpeg'))


def test_find_rejected_keeps_order_and_only_offenders(make_content):
    """Test batch pre-screen lists only rejected items, in input order."""
    contents = [
        make_content(filename='a.png', content_type='image/png'),
        make_content(filename='b.txt', content_type='text/plain'),
        make_content(filename='c.jpg', content_type='image/jpg'),
        make_content(filename='d.gif', content_type='image/gif'),
    ]

    assert find_rejected(contents) == [
        ('b.txt', 'text/plain'),
        ('d.gif', 'image/gif'),
    ]


def test_find_rejected_empty_for_valid_batch(make_content):
    """Test fully valid batch yields no offenders."""
    assert find_rejected([make_content(), make_content(filename='x.png')]) == []
