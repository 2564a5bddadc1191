"""Build nested dicts from the event stream.

The tokenizer never builds a tree; this shows the consumer side of the
pull protocol doing it with an explicit stack.
"""

from typing import Any

from tagscan import EventKind, Tokenizer, XmlStatementError

SOURCE = """
<library name="central">
    <book id="1" year="1999">Dune</book>
    <book id="2" tags='["sf", "classic"]'><note>signed</note></book>
    <shelf empty="true"/>
</library>
"""


def build_tree(source: str) -> dict[str, Any]:
    root: dict[str, Any] = {"children": []}
    stack = [root]
    tokenizer = Tokenizer(source)
    while not (result := tokenizer.pull()).done:
        if result.kind in (EventKind.OPENED, EventKind.SELF_CLOSED):
            node = {
                "tag": tokenizer.tag_name,
                "attributes": {a.key: a.value for a in tokenizer.attributes},
                "children": [],
            }
            stack[-1]["children"].append(node)
            if result.kind == EventKind.OPENED:
                stack.append(node)
        elif result.kind == EventKind.CONTENT:
            stack[-1]["content"] = tokenizer.content
        else:
            stack.pop()
    return root["children"][0]


if __name__ == "__main__":
    try:
        print(build_tree(SOURCE))
    except XmlStatementError as err:
        print(f"Invalid document: {err}")
