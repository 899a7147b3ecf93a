"""Tests for POD extraction, parsing and rendering."""

import pytest

from podreadme.pod import extract_pod, parse, render_text
from podreadme.pod.inline import parse_inline, resolve_escape
from podreadme.pod.nodes import Format, ItemList, Link, Paragraph, Raw, Verbatim

MODULE_SOURCE = """package My::Dist;
use strict;

=head1 NAME

My::Dist - Frobnicate widgets

=head1 SYNOPSIS

    use My::Dist;
    my $w = My::Dist->new;

=cut

sub new { bless {}, shift }

=head1 DESCRIPTION

This is B<bold> and C<code>.

=cut

1;
"""

EXTRACTED = (
    "=head1 NAME\n"
    "\n"
    "My::Dist - Frobnicate widgets\n"
    "\n"
    "=head1 SYNOPSIS\n"
    "\n"
    "    use My::Dist;\n"
    "    my $w = My::Dist->new;\n"
    "\n"
    "=head1 DESCRIPTION\n"
    "\n"
    "This is B<bold> and C<code>.\n"
)


class TestExtractPod:
    """POD blocks are pulled out of source code in order."""

    def test_extracts_blocks_in_order(self):
        assert extract_pod(MODULE_SOURCE) == EXTRACTED

    def test_pure_pod_extracts_to_itself(self):
        assert extract_pod(EXTRACTED) == EXTRACTED

    def test_source_without_pod_is_empty(self):
        assert extract_pod("package Foo;\n1;\n") == ""
        assert extract_pod("") == ""

    def test_unterminated_block_runs_to_end(self):
        assert extract_pod("1;\n__END__\n\n=head1 NAME\n\nFoo\n") == "=head1 NAME\n\nFoo\n"


class TestInline:
    """Formatting codes and escapes."""

    def test_simple_codes(self):
        assert parse_inline("B<bold> text") == [Format("B", ["bold"]), " text"]

    def test_nested_codes(self):
        assert parse_inline("B<I<x>>") == [Format("B", [Format("I", ["x"])])]

    def test_multi_bracket_code(self):
        assert parse_inline("C<< $a->b >>") == [Format("C", ["$a->b"])]

    def test_dropped_codes(self):
        assert parse_inline("a X<index entry>b") == ["a ", "b"]

    @pytest.mark.parametrize(
        "name, expected",
        [("lt", "<"), ("gt", ">"), ("verbar", "|"), ("sol", "/"), ("eacute", "é"), ("0x41", "A"), ("65", "A")],
    )
    def test_escapes(self, name, expected):
        assert resolve_escape(name) == expected

    def test_unknown_escape_is_kept(self):
        assert resolve_escape("nosuchentity") == "E<nosuchentity>"

    def test_links(self):
        assert parse_inline("L<Foo::Bar>") == [Link([], "Foo::Bar", None, False)]
        assert parse_inline("L<docs|http://example.org/>") == [Link(["docs"], "http://example.org/", None, True)]
        assert parse_inline('L</"SEE ALSO">') == [Link([], "", "SEE ALSO", False)]
        assert parse_inline('L<Foo/"Methods">') == [Link([], "Foo", "Methods", False)]


class TestParse:
    """Block structure of POD documents."""

    def test_skips_code_outside_pod(self):
        document = parse("code;\n\n=head1 X\n\n=cut\n\nmore code;\n")
        assert len(document.blocks) == 1

    def test_bullet_list(self):
        document = parse("=over 4\n\n=item * one\n\n=item * two\n\n=back\n")
        item_list = document.blocks[0]
        assert isinstance(item_list, ItemList)
        assert item_list.kind == "bullet"
        assert [item.label for item in item_list.items] == [["one"], ["two"]]

    def test_numbered_list(self):
        document = parse("=over\n\n=item 1.\n\nFirst\n\n=item 2.\n\nSecond\n\n=back\n")
        item_list = document.blocks[0]
        assert item_list.kind == "number"
        assert item_list.items[0].number == 1
        assert item_list.items[0].body == [Paragraph(["First"])]

    def test_nested_list(self):
        document = parse(
            "=over\n\n=item outer\n\n=over\n\n=item * inner\n\n=back\n\n=back\n"
        )
        outer = document.blocks[0]
        assert outer.kind == "text"
        inner = outer.items[0].body[0]
        assert isinstance(inner, ItemList)
        assert inner.kind == "bullet"

    def test_encoding(self):
        assert parse("=encoding utf8\n\n=head1 NAME\n").encoding == "utf8"

    def test_raw_regions(self):
        document = parse("=begin html\n\n<p>x</p>\n\n=end html\n\n=for text Plain only\n")
        assert document.blocks == [Raw("html", "<p>x</p>"), Raw("text", "Plain only")]

    def test_consecutive_verbatim_paragraphs_are_merged(self):
        document = parse("=pod\n\n  a\n\n  b\n")
        assert document.blocks == [Verbatim("  a\n\n  b")]

    def test_title(self):
        assert parse(EXTRACTED).title() == "My::Dist - Frobnicate widgets"


class TestRenderText:
    """Plain text layout."""

    def test_module(self):
        expected = (
            "NAME\n"
            "\n"
            "    My::Dist - Frobnicate widgets\n"
            "\n"
            "SYNOPSIS\n"
            "\n"
            "        use My::Dist;\n"
            "        my $w = My::Dist->new;\n"
            "\n"
            "DESCRIPTION\n"
            "\n"
            '    This is bold and "code".\n'
        )
        assert render_text(parse(EXTRACTED)) == expected

    def test_bullets(self):
        text = render_text(parse("=over\n\n=item *\n\nFirst item\n\n=item *\n\nSecond\n\n=back\n"))
        assert text == "    *   First item\n\n    *   Second\n"

    def test_definition_items(self):
        text = render_text(parse("=over\n\n=item --verbose\n\nBe chatty.\n\n=back\n"))
        assert text == "    --verbose\n        Be chatty.\n"

    def test_long_paragraph_is_wrapped(self):
        words = " ".join(["widget"] * 40)
        text = render_text(parse(f"=pod\n\n{words}\n"))
        lines = text.splitlines()
        assert len(lines) > 1
        assert all(len(line) <= 76 for line in lines)
        assert all(line.startswith("    ") for line in lines)

    def test_non_breaking_spaces(self):
        words = " ".join(["widget"] * 11)
        text = render_text(parse(f"=pod\n\n{words} S<do not split me>\n"))
        assert "do not split me" in text

    def test_empty(self):
        assert render_text(parse("")) == ""
