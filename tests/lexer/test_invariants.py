"""Property-based tests for tokenizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hypothesis import given, settings
from hypothesis import strategies as st

from tagscan import ErrorKind, EventKind, TokenizerConfig, XmlStatementError, tokenize
from tagscan.lexer import Tokenizer

names = st.from_regex(r"[a-z][a-z0-9_.:-]{0,5}", fullmatch=True)
# No letter past "m", so a word can never spell true, false or null
words = st.text(alphabet="abcdefghijklm", min_size=1, max_size=10)
scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**6), max_value=10**6),
    words,
)


@dataclass
class Element:
    name: str
    attributes: list[tuple[str, object]]
    content: object = None
    children: list["Element"] = field(default_factory=list)


def render_scalar(value: object) -> str:
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def render(element: Element) -> str:
    attrs = "".join(f' {k}="{render_scalar(v)}"' for k, v in element.attributes)
    if element.content is None and not element.children:
        return f"<{element.name}{attrs}/>"
    body = ""
    if element.content is not None:
        body = f" {render_scalar(element.content)} "
    body += "".join(render(child) for child in element.children)
    return f"<{element.name}{attrs}>{body}</{element.name}>"


def expected_events(element: Element) -> list[tuple[EventKind, str, object]]:
    if element.content is None and not element.children:
        return [(EventKind.SELF_CLOSED, element.name, None)]
    events = [(EventKind.OPENED, element.name, None)]
    if element.content is not None:
        events.append((EventKind.CONTENT, "", element.content))
    for child in element.children:
        events.extend(expected_events(child))
    events.append((EventKind.CLOSED, element.name, None))
    return events


attributes = st.lists(st.tuples(names, scalars), max_size=3)
leaves = st.builds(
    Element,
    name=names,
    attributes=attributes,
    content=st.one_of(st.none(), st.integers(), words),
)
elements = st.recursive(
    leaves,
    lambda children: st.builds(
        Element,
        name=names,
        attributes=attributes,
        content=st.one_of(st.none(), words),
        children=st.lists(children, min_size=1, max_size=3),
    ),
    max_leaves=12,
)


class TestWellFormedDocuments:
    """Generated documents tokenize into the events they were built from."""

    @given(elements)
    @settings(max_examples=150)
    def test_events_match_structure(self, root: Element) -> None:
        events = tokenize(render(root))

        actual = [
            (e.kind, e.name, e.content if e.kind == EventKind.CONTENT else None)
            for e in events
        ]
        assert actual == expected_events(root)

    @given(elements)
    @settings(max_examples=100)
    def test_attributes_are_coerced(self, root: Element) -> None:
        events = tokenize(render(root))
        tagged = [e for e in events if e.kind in (EventKind.OPENED, EventKind.SELF_CLOSED)]

        def walk(element: Element) -> list[Element]:
            out = [element]
            for child in element.children:
                out.extend(walk(child))
            return out

        for event, element in zip(tagged, walk(root), strict=True):
            assert [(a.key, a.value) for a in event.attributes] == element.attributes

    @given(elements)
    @settings(max_examples=100)
    def test_stack_empty_after_full_iteration(self, root: Element) -> None:
        tokenizer = Tokenizer(render(root))
        depth = 0
        for kind in tokenizer:
            if kind == EventKind.OPENED:
                depth += 1
            elif kind == EventKind.CLOSED:
                depth -= 1
            assert tokenizer.depth == depth
        assert tokenizer.depth == 0


class TestArbitraryInput:
    """Arbitrary text either tokenizes or fails with a structural error."""

    @given(st.text(alphabet="<>/!?=\"' ab&\n", max_size=200))
    @settings(max_examples=300)
    def test_only_structural_errors(self, source: str) -> None:
        try:
            events = tokenize(source)
        except XmlStatementError as err:
            assert 0 <= err.offset <= len(source)
            assert err.lineno is not None and err.lineno >= 1
        else:
            assert all(0 <= e.offset < len(source) for e in events)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_lenient_mode_never_fails_at_end(self, source: str) -> None:
        config = TokenizerConfig(strict_end=False)
        try:
            tokenize(source, config=config)
        except XmlStatementError as err:
            assert err.kind != ErrorKind.UNEXPECTED_END
            assert "never closed" not in err.message
