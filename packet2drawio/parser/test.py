"""Unit tests for the packet parser."""

import pytest

from packet2drawio.ir import BitRange
from packet2drawio.parser import parse_line, parse_packet


class TestParseLine:
    """Tests for single-line parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "start,end,label",
        [
            (0, 15, "Source Port"),
            (32, 63, "Sequence Number"),
            (7, 7, "F"),
            (96, 99, "Data Offset (words)"),
        ],
    )
    def test_quoted_label(self, start, end, label):
        """Quoted declarations yield exactly the declared values."""
        assert parse_line(f'{start}-{end}: "{label}"') == BitRange(
            start=start, end=end, label=label
        )

    @pytest.mark.unit
    def test_unquoted_matches_quoted(self):
        """Unquoted labels parse to the same record as quoted ones."""
        assert parse_line("0-7: Version") == parse_line('0-7: "Version"')

    @pytest.mark.unit
    def test_leading_whitespace(self):
        """Indented declarations are accepted."""
        assert parse_line('    16-31: "Checksum"') == BitRange(
            start=16, end=31, label="Checksum"
        )

    @pytest.mark.unit
    def test_no_space_after_colon(self):
        """Whitespace after the colon is optional."""
        assert parse_line('0-3:"Ver"').label == "Ver"

    @pytest.mark.unit
    def test_trailing_whitespace_after_quoted_label(self):
        """Trailing whitespace after a quoted label is ignored."""
        assert parse_line('0-3: "Ver"   ').label == "Ver"

    @pytest.mark.unit
    def test_unquoted_label_keeps_capture(self):
        """The unquoted capture runs to end of line."""
        assert parse_line("0-3: Ver  ").label == "Ver  "

    @pytest.mark.unit
    def test_carriage_return_stripped(self):
        """CRLF input behaves like LF input."""
        assert parse_line("0-3: Ver\r").label == "Ver"
        assert parse_line('0-3: "Ver"\r').label == "Ver"

    @pytest.mark.unit
    def test_empty_quoted_label(self):
        """An empty quoted label is kept as an empty string."""
        assert parse_line('0-3: ""') == BitRange(start=0, end=3, label="")

    @pytest.mark.unit
    def test_embedded_quote_falls_back_to_unquoted(self):
        """Escaped quotes are unsupported; the whole tail becomes the label."""
        assert parse_line(r'0-3: "a\"b"').label == r'"a\"b"'

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "packet-beta",
            'title "TCP Packet"',
            "%% comment 0-3: not a field",
            "0-3 Missing colon",
            "0-: Missing end",
            "-1-3: Negative",
            "0-3:",
            "a-b: Letters",
            "0 - 3: Spaced hyphen",
        ],
    )
    def test_non_matching_lines(self, line):
        """Lines without the digits-digits: prefix produce nothing."""
        assert parse_line(line) is None

    @pytest.mark.unit
    def test_inverted_range_not_rejected(self):
        """end < start is parsed as written."""
        assert parse_line("9-2: Odd") == BitRange(start=9, end=2, label="Odd")


class TestParsePacket:
    """Tests for whole-document parsing."""

    @pytest.mark.unit
    def test_mermaid_document(self, tcp_source):
        """Header and title lines are skipped; fields are kept in order."""
        ranges = parse_packet(tcp_source)
        assert [r.label for r in ranges] == [
            "Source Port",
            "Destination Port",
            "Sequence Number",
            "Acknowledgment Number",
        ]
        assert ranges[2] == BitRange(start=32, end=63, label="Sequence Number")

    @pytest.mark.unit
    def test_order_follows_input_not_offsets(self):
        """Output order is line order even when offsets go backwards."""
        ranges = parse_packet('16-31: "B"\n0-15: "A"')
        assert [r.label for r in ranges] == ["B", "A"]

    @pytest.mark.unit
    def test_no_matches_gives_empty_list(self):
        """Text with no declarations parses to an empty list."""
        assert parse_packet("packet-beta\ntitle Nothing here\n") == []

    @pytest.mark.unit
    def test_empty_text(self):
        """Empty input parses to an empty list."""
        assert parse_packet("") == []

    @pytest.mark.unit
    def test_windows_line_endings(self):
        """CRLF documents parse like LF documents."""
        ranges = parse_packet('0-7: "Source Port"\r\n8-15: Dest Port\r\n')
        assert [r.label for r in ranges] == ["Source Port", "Dest Port"]
