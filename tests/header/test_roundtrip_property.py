# topmark:header:start
#
#   project      : Header42
#   file         : test_roundtrip_property.py
#   file_relpath : tests/header/test_roundtrip_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the header engine and the document layer.

Asserts, over generated metadata and documents:
1) decoding a rendered header gives back the metadata,
2) every rendered header keeps the frame geometry, whatever the values,
3) inserting twice with the same inputs is idempotent,
4) updating keeps the creation fields of a header written for any identity,
5) updating never touches a document without a header.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from hypothesis import HealthCheck, given, settings

from header42.document import PlanMode, PlanOutcome, detect_newline, plan_header
from header42.header.layout import HEADER_HEIGHT, HEADER_WIDTH, matches_frame
from header42.header.model import HeaderInfo, Identity
from header42.header.parser import extract_header, get_header_info, split_header_lines
from header42.header.renderer import render_header
from tests.strategies_header42 import (
    s_document_body,
    s_any_identity,
    s_header_info,
    s_identity,
    s_language_id,
    s_timestamp,
    s_wild_header_info,
)

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=100, deadline=None)
@given(language_id=s_language_id(), info=s_header_info())
def test_render_then_decode_roundtrip(language_id: str, info: HeaderInfo) -> None:
    """Values that fit their spans are decoded unchanged, in every comment style."""
    rendered = render_header(language_id, info)
    block = extract_header(rendered)

    assert block is not None
    assert get_header_info(block) == info


@settings(max_examples=100, deadline=None)
@given(language_id=s_language_id(), info=s_wild_header_info())
def test_render_keeps_geometry(language_id: str, info: HeaderInfo) -> None:
    """Arbitrary values never change the row count or width."""
    rendered = render_header(language_id, info)
    lines = split_header_lines(rendered)

    assert rendered.count("\n") == HEADER_HEIGHT
    assert all(len(line) == HEADER_WIDTH for line in lines)
    assert matches_frame(lines)


@settings(suppress_health_check=[HealthCheck.too_slow], max_examples=60, deadline=None)
@given(
    body=s_document_body(),
    language_id=s_language_id(),
    identity=s_identity(),
    now=s_timestamp(),
)
def test_insert_is_idempotent(
    body: str, language_id: str, identity: Identity, now: datetime
) -> None:
    """A second insert with the same inputs reproduces the first result."""
    first = plan_header(
        body, language_id=language_id, filename="main.c", identity=identity, now=now
    )
    second = plan_header(
        first.updated_text,
        language_id=language_id,
        filename="main.c",
        identity=identity,
        now=now,
    )

    assert first.outcome is PlanOutcome.INSERTED
    assert second.outcome is PlanOutcome.REPLACED
    assert second.updated_text == first.updated_text
    assert first.updated_text.endswith(body)
    assert detect_newline(first.updated_text) == detect_newline(body)


@settings(suppress_health_check=[HealthCheck.too_slow], max_examples=100, deadline=None)
@given(
    body=s_document_body(),
    language_id=s_language_id(),
    creator=s_any_identity(),
    operator=s_any_identity(),
    created=s_timestamp(),
    saved=s_timestamp(),
)
def test_update_keeps_creation_for_any_identity(
    body: str,
    language_id: str,
    creator: Identity,
    operator: Identity,
    created: datetime,
    saved: datetime,
) -> None:
    """Whatever identity wrote the header, the next save reads it back and keeps its creation."""
    first = plan_header(
        body, language_id=language_id, filename="main.c", identity=creator, now=created
    )
    second = plan_header(
        first.updated_text,
        language_id=language_id,
        filename="main.c",
        identity=operator,
        now=saved,
        mode=PlanMode.UPDATE,
    )

    assert first.info is not None
    assert second.outcome is PlanOutcome.REPLACED
    assert second.info is not None
    assert second.info.created_at == first.info.created_at
    assert second.updated_text.endswith(body)

@settings(max_examples=60, deadline=None)
@given(body=s_document_body(), language_id=s_language_id(), identity=s_identity())
def test_update_leaves_headerless_documents_alone(
    body: str, language_id: str, identity: Identity
) -> None:
    """The save hook never inserts a header."""
    plan = plan_header(
        body,
        language_id=language_id,
        filename="main.c",
        identity=identity,
        now=datetime(2024, 1, 1),
        mode=PlanMode.UPDATE,
    )

    assert plan.outcome is PlanOutcome.NO_HEADER
    assert plan.updated_text == body
    assert not plan.changed
