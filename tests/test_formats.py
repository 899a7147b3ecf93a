"""Tests for the README format registry and converters."""

import pytest

from podreadme.errors import UnknownFormat
from podreadme.formats import FORMATS, known_formats, resolve
from podreadme.formats.html import HtmlFormat
from podreadme.formats.markdown import MarkdownFormat
from podreadme.formats.pod import PodFormat
from podreadme.formats.text import TextFormat
from podreadme.models import FormatId

MARKUP = (
    "=head1 NAME\n"
    "\n"
    "My::Dist - Frobnicate widgets\n"
    "\n"
    "=head1 SYNOPSIS\n"
    "\n"
    "    my $w = My::Dist->new;\n"
    "\n"
    "=head1 DESCRIPTION\n"
    "\n"
    "This is B<bold> and C<code>. See L<Other::Module>.\n"
)


def test_known_formats():
    assert known_formats() == ("text", "markdown", "pod", "html")


@pytest.mark.parametrize(
    "format_id, filename",
    [("text", "README"), ("markdown", "README.mkdn"), ("pod", "README.pod"), ("html", "README.html")],
)
def test_resolve_and_default_filenames(format_id, filename):
    fmt = resolve(format_id)
    assert fmt.identifier == FormatId(format_id)
    assert fmt.default_filename == filename


def test_resolve_is_case_insensitive():
    assert resolve("Markdown") is FORMATS[FormatId.MARKDOWN]
    assert resolve(FormatId.POD) is FORMATS[FormatId.POD]


def test_resolve_unknown_format():
    with pytest.raises(UnknownFormat, match="rtf"):
        resolve("rtf")


@pytest.mark.parametrize("format_id", ["text", "markdown", "pod", "html"])
def test_empty_markup_converts_without_error(format_id):
    fmt = resolve(format_id)
    first = fmt.convert("")
    assert isinstance(first, str)
    assert fmt.convert("") == first


@pytest.mark.parametrize("format_id", ["text", "markdown", "pod", "html"])
def test_conversion_is_deterministic(format_id):
    fmt = resolve(format_id)
    assert fmt.convert(MARKUP) == fmt.convert(MARKUP)


def test_text_format():
    content = TextFormat().convert(MARKUP)
    assert content.startswith("NAME\n\n    My::Dist - Frobnicate widgets\n")
    assert '    This is bold and "code". See Other::Module.\n' in content


def test_pod_format_keeps_only_pod():
    source = "package My::Dist;\n\n" + MARKUP + "\n=cut\n\nsub new {}\n"
    assert PodFormat().convert(source) == MARKUP


def test_html_format():
    content = HtmlFormat().convert(MARKUP)
    assert content.startswith("<!DOCTYPE html>")
    assert "<title>My::Dist - Frobnicate widgets</title>" in content
    assert '<h1 id="NAME">NAME</h1>' in content
    assert "<b>bold</b>" in content
    assert "<code>code</code>" in content
    assert '<a href="https://metacpan.org/pod/Other::Module">Other::Module</a>' in content
    assert "<pre><code>    my $w = My::Dist-&gt;new;</code></pre>" in content
    assert "<meta charset" not in content


def test_html_format_empty_document():
    content = HtmlFormat().convert("")
    assert "<title></title>" in content
    assert "<body>\n</body>" in content


def test_markdown_format():
    content = MarkdownFormat().convert(MARKUP)
    assert "# NAME" in content
    assert "**bold**" in content
    assert "`code`" in content
    assert content.endswith("\n")


def test_markdown_empty_markup():
    assert MarkdownFormat().convert("") == ""


class TestEncoding:
    """Declared =encoding selects the output encoding."""

    def test_declared_encoding(self):
        markup = "=encoding latin1\n\n=head1 NAME\n\nCafé\n"
        assert TextFormat().output_encoding(markup) == "iso8859-1"
        assert '<meta charset="iso8859-1">' in HtmlFormat().convert(markup)

    def test_no_declared_encoding(self):
        assert TextFormat().output_encoding(MARKUP) is None

    def test_unknown_encoding_is_ignored(self, caplog):
        assert TextFormat().output_encoding("=encoding klingon\n") is None
        assert "klingon" in caplog.text
