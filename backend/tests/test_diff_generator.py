"""
Tests for unified diff generation and parsing
"""

from services.diff_generator import DiffGenerator, split_lines


def test_split_lines_only_on_newline():
    assert split_lines("a\nb\r\nc") == ["a\n", "b\r\n", "c"]
    assert split_lines("a\n") == ["a\n"]
    assert split_lines("") == []
    assert split_lines("form\x0cfeed\n") == ["form\x0cfeed\n"]


def test_generate_diff_for_empty_sides_has_headers_only():
    generator = DiffGenerator()

    assert generator.generate_diff("", "", "empty.txt") == "--- empty.txt\tZIP 1\n+++ empty.txt\tZIP 2\n"


def test_generate_diff_for_new_content():
    diff_text = DiffGenerator().generate_diff("", "first\nsecond\n", "new.txt")

    assert diff_text.splitlines()[2:] == ["@@ -0,0 +1,2 @@", "+first", "+second"]


class TestParseHunks:
    """Tests for DiffGenerator.parse_hunks"""

    def test_line_numbers(self):
        generator = DiffGenerator(context_lines=1)
        before = "one\ntwo\nthree\nfour\n"
        after = "one\n2\nthree\nfour\nfive\n"

        hunks = generator.parse_hunks(generator.generate_diff(before, after, "n.txt"))

        assert len(hunks) == 1
        hunk = hunks[0]
        assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (1, 4, 1, 5)

        rows = [(line.kind, line.content, line.old_number, line.new_number) for line in hunk.lines]
        assert rows == [
            ("context", "one", 1, 1),
            ("delete", "two", 2, None),
            ("add", "2", None, 2),
            ("context", "three", 3, 3),
            ("context", "four", 4, 4),
            ("add", "five", None, 5),
        ]

    def test_counts_default_to_one(self):
        hunks = DiffGenerator().parse_hunks("--- a\n+++ b\n@@ -3 +3 @@\n-x\n+y\n")

        assert hunks[0].old_lines == 1
        assert hunks[0].new_lines == 1

    def test_no_newline_marker_is_not_a_row(self):
        generator = DiffGenerator()
        diff_text = generator.generate_diff("hello", "hello world", "a.txt")

        hunks = generator.parse_hunks(diff_text)

        assert [line.kind for line in hunks[0].lines] == ["delete", "add"]

    def test_removed_line_starting_with_dashes(self):
        generator = DiffGenerator()
        diff_text = generator.generate_diff("-- comment\nkeep\n", "keep\n", "q.sql")

        hunks = generator.parse_hunks(diff_text)

        assert hunks[0].lines[0].kind == "delete"
        assert hunks[0].lines[0].content == "-- comment"


def test_summarize_counts_changes():
    generator = DiffGenerator()
    diff_text = generator.generate_diff("a\nb\nc\n", "a\nB\nc\nd\ne\n", "f.txt")

    summary = generator.summarize("f.txt", diff_text)

    assert summary.path == "f.txt"
    assert summary.additions == 3
    assert summary.deletions == 1


class TestParseHunksLineBreaks:
    """Only \\n ends a line; other separators are part of the content"""

    def test_form_feed_stays_in_line(self):
        generator = DiffGenerator()
        diff_text = generator.generate_diff("a\x0cb\nc\n", "a\x0cb\nC\n", "x.txt")

        hunks = generator.parse_hunks(diff_text)

        rows = [(line.kind, line.content, line.old_number, line.new_number) for line in hunks[0].lines]
        assert rows == [
            ("context", "a\x0cb", 1, 1),
            ("delete", "c", 2, None),
            ("add", "C", None, 2),
        ]

    def test_carriage_return_kept(self):
        generator = DiffGenerator()
        diff_text = generator.generate_diff("x\r\n", "y\r\n", "win.txt")

        summary = generator.summarize("win.txt", diff_text)

        assert [line.content for line in summary.hunks[0].lines] == ["x\r", "y\r"]
        assert summary.additions == 1
        assert summary.deletions == 1
