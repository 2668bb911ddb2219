from __future__ import annotations

import textwrap

from rich.markup import escape
from rich.text import Text

from fuzzy_rank.models import Match

MATCH_STYLE = "bold"


def highlight_match(match: Match, *, style: str = MATCH_STYLE) -> Text:
    text = Text(match.text)
    for index in match.matched_indexes:
        text.stylize(style, index, index + 1)
    return text


def format_elapsed(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


def format_match_summary(count: int, seconds: float) -> str:
    return f"found {count:,} match{'es' if count != 1 else ''} in {format_elapsed(seconds)}"


def render_kv_box(rows: list[tuple[str, str]], width: int) -> list[str]:
    if not rows:
        return []
    label_width = max(len(label) for label, _ in rows)
    inner_width = max(30, width - 2)
    value_width = max(10, inner_width - label_width - 3)

    lines = ["╭" + ("─" * inner_width) + "╮"]
    for label, value in rows:
        wrapped = textwrap.wrap(value, width=value_width) or [""]
        lines.append(f"│ {label:<{label_width}} {wrapped[0]:<{value_width}} │")
        for continuation in wrapped[1:]:
            lines.append(f"│ {'':<{label_width}} {continuation:<{value_width}} │")
    lines.append("╰" + ("─" * inner_width) + "╯")
    return lines


def render_match_details(pattern: str, match: Match, *, content_width: int) -> str:
    rows = [
        ("Pattern", pattern),
        ("Candidate", match.text),
        ("Index", str(match.index)),
        ("Score", str(match.score)),
        ("Matched Indexes", ", ".join(str(index) for index in match.matched_indexes)),
    ]
    lines = [
        f"# {escape(match.text)}",
        "",
        highlight_match(match).markup,
        "",
    ]
    lines.extend(escape(line) for line in render_kv_box(rows, content_width))
    return "\n".join(lines)
