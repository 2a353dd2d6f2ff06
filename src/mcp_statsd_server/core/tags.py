"""Tag section decoding (`#key:value,key,...`)."""

from __future__ import annotations

from .cursor import Cursor


def split_tag(token: str) -> tuple[str, str]:
    """Split a tag on its first colon; a bare key gets an empty value.

    Only the first colon is structural, so `redis:10.0.0.16:6379` keeps
    `10.0.0.16:6379` as the value.
    """
    key, _, value = token.partition(":")
    return key, value


def parse_tags(cursor: Cursor) -> dict[str, str]:
    """Decode the tag section the cursor currently points at.

    Stops at end of input, at an empty token, or once a token ended on `|`
    (the next section begins there). Duplicate keys keep the last value.
    """
    tags: dict[str, str] = {}
    cursor.skip()  # `#`

    while cursor.last() != "|":
        token = cursor.take_until(",|")
        if not token:
            break
        key, value = split_tag(token)
        tags[key] = value

    return tags
