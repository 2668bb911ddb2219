from fuzzy_rank.models import Match
from fuzzy_rank.rendering import (
    format_elapsed,
    format_match_summary,
    highlight_match,
    render_kv_box,
    render_match_details,
)


def test_highlight_match_styles_matched_characters() -> None:
    text = highlight_match(Match(text="The Black Knight", matched_indexes=[0, 10]))

    assert text.plain == "The Black Knight"
    assert [(span.start, span.end, span.style) for span in text.spans] == [
        (0, 1, "bold"),
        (10, 11, "bold"),
    ]


def test_format_elapsed_picks_unit() -> None:
    assert format_elapsed(0.0005) == "500µs"
    assert format_elapsed(0.0125) == "12.50ms"
    assert format_elapsed(2.5) == "2.50s"


def test_format_match_summary() -> None:
    assert format_match_summary(1, 0.002) == "found 1 match in 2.00ms"
    assert format_match_summary(1234, 0.002) == "found 1,234 matches in 2.00ms"


def test_render_kv_box_wraps_long_values() -> None:
    lines = render_kv_box([("Candidate", "x" * 50)], width=40)

    assert lines[0].startswith("╭")
    assert lines[-1].startswith("╰")
    assert len(lines) == 4
    assert {len(line) for line in lines} == {40}


def test_render_match_details_lists_match_fields() -> None:
    details = render_match_details(
        "tk",
        Match(text="The Black Knight", index=3, matched_indexes=[0, 10], score=18),
        content_width=60,
    )

    assert details.startswith("# The Black Knight")
    assert "Score" in details
    assert "18" in details
    assert "0, 10" in details
