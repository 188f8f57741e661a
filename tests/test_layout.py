from tree_noter.config import Config
from tree_noter.layout import (
    build_decorator,
    comment_max_width,
    compute_alignment_width,
    render_aligned,
    render_decorated,
    render_line,
    wrap_comment,
)
from tree_noter.splitter import split_line


def _split(*lines: str):
    return [split_line(line, "#") for line in lines]


def test_alignment_width_uses_widest_tree_content_plus_margin():
    lines = _split("├── src # Source", "└── pkg.json # Config")
    assert compute_alignment_width(lines, gap=10) == 15


def test_alignment_width_never_below_gap():
    lines = _split("├── src # Source")
    assert compute_alignment_width(lines, gap=30) == 30


def test_alignment_width_counts_lines_without_marker_and_skips_blanks():
    lines = _split("", "a-long-line-without-any-comment", "├── a # b", "    ")
    assert compute_alignment_width(lines, gap=0) == len("a-long-line-without-any-comment") + 3


def test_alignment_width_of_empty_input():
    assert compute_alignment_width([], gap=0) == 3


def test_comment_max_width_clamps_at_zero():
    assert comment_max_width(80, 30) == 49
    assert comment_max_width(20, 30) == 0


def test_wrap_disabled_returns_comment_unchanged():
    comment = "a fairly long comment that would certainly need wrapping"
    assert wrap_comment(comment, 10, enabled=False) == [comment]


def test_wrap_packs_words_greedily():
    assert wrap_comment("alpha beta gamma delta", 10, enabled=True) == [
        "alpha beta",
        "gamma",
        "delta",
    ]
    assert wrap_comment("alpha beta gamma delta", 11, enabled=True) == [
        "alpha beta",
        "gamma delta",
    ]


def test_wrap_never_splits_long_words():
    assert wrap_comment("supercalifragilistic is long", 5, enabled=True) == [
        "supercalifragilistic",
        "is",
        "long",
    ]


def test_wrap_collapses_whitespace_runs():
    assert wrap_comment("spaced   out\twords", 80, enabled=True) == ["spaced out words"]


def test_wrap_empty_comment_yields_single_empty_fragment():
    assert wrap_comment("", 10, enabled=True) == [""]


def test_build_decorator_repeats_and_truncates_pattern():
    assert build_decorator("-", 5) == "-----"
    assert build_decorator("=-", 5) == "=-=-="
    assert build_decorator("=-", 4) == "=-=-"
    assert build_decorator(" === ", 7) == " ===  ="


def test_build_decorator_falls_back_for_non_positive_width():
    assert build_decorator("-----", 0) == "-"
    assert build_decorator("=-", -4) == "-"


def test_render_aligned_pads_to_alignment_width():
    (line,) = _split("├── src # Source")
    assert render_aligned(line, ["Source"], 15, Config()) == ["├── src" + " " * 8 + "Source"]


def test_render_aligned_indents_continuation_fragments():
    (line,) = _split("├── src # ignored")
    rendered = render_aligned(line, ["first", "second"], 15, Config(wrap_indent=2))
    assert rendered == ["├── src" + " " * 8 + "first", " " * 17 + "second"]


def test_render_aligned_does_not_truncate_wide_tree_content():
    (line,) = _split("├── a-very-long-directory-name # note")
    rendered = render_aligned(line, ["note"], 10, Config())
    assert rendered == ["├── a-very-long-directory-namenote"]


def test_render_decorated_fills_max_width():
    (line,) = _split("├── src # Source")
    rendered = render_decorated(line, ["Source"], Config(max_width=30, separator="-"))
    assert rendered == ["├── src " + "-" * 14 + " Source"]
    assert len(rendered[0]) == 29


def test_render_decorated_indents_continuation_fragments():
    (line,) = _split("├── src # ignored")
    config = Config(max_width=30, separator="-", wrap_indent=1)
    rendered = render_decorated(line, ["Source", "more"], config)
    assert rendered[1] == " " * 24 + "more"


def test_render_decorated_uses_fallback_when_no_room():
    (line,) = _split("├── src # Source")
    assert render_decorated(line, ["Source"], Config(max_width=10)) == ["├── src - Source"]


def test_render_line_passes_lines_without_comment_through():
    (line,) = _split("└── plain   ")
    assert render_line(line, 30, 49, Config()) == ["└── plain   "]
    assert render_line(line, 30, 49, Config(decorator=True)) == ["└── plain   "]


def test_render_line_renders_blank_line_as_empty():
    (line,) = _split("   ")
    assert render_line(line, 30, 49, Config()) == [""]
    assert render_line(line, 30, 49, Config(decorator=True)) == [""]


def test_render_line_wraps_in_aligned_style():
    (line,) = _split("├── src # alpha beta gamma delta epsilon")
    config = Config(gap=10, max_width=30, wrap=True)
    assert render_line(line, 10, 19, config) == [
        "├── src" + " " * 3 + "alpha beta gamma",
        " " * 10 + "delta epsilon",
    ]


def test_render_line_wraps_in_decorator_style():
    (line,) = _split("├── src # alpha beta gamma delta epsilon")
    config = Config(gap=10, max_width=30, wrap=True, decorator=True, separator="-")
    assert render_line(line, 10, 19, config) == [
        "├── src ---- alpha beta gamma",
        " " * 13 + "delta epsilon",
    ]


def test_render_line_wraps_at_the_given_limit():
    (line,) = _split("├── src # alpha beta gamma")
    config = Config(max_width=80, wrap=True)
    assert render_line(line, 10, 10, config) == [
        "├── src" + " " * 3 + "alpha beta",
        " " * 10 + "gamma",
    ]
