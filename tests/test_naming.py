"""Tests for plugin-name based configuration inference."""

import pytest

from podreadme.formats import known_formats
from podreadme.naming import NameInference


@pytest.fixture
def inference():
    return NameInference(known_formats())


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ReadmePodInRoot", ("pod", "root")),
        ("HtmlInRoot", ("html", "root")),
        ("ReadmeAnyFromPod", (None, None)),
        ("ReadmeAnyFromPod/HtmlInRoot", ("html", "root")),
        ("ReadmeAnyFromPod / ReadmeMarkdownInBuild", ("markdown", "build")),
        ("markdown", ("markdown", None)),
        ("READMETEXTBUILD", ("text", "build")),
        ("PodRoot", ("pod", "root")),
        ("MyReadme", (None, None)),
        ("HtmlInRootAlso", (None, None)),
    ],
)
def test_infer(inference, name, expected):
    assert inference.infer(name) == expected


def test_results_are_memoized(inference):
    first = inference.infer("ReadmePodInRoot")
    assert inference.infer("ReadmePodInRoot") is first
    inference.infer("HtmlInRoot")
    assert len(inference) == 2


def test_separate_tables_do_not_share_entries():
    one = NameInference(known_formats())
    two = NameInference(known_formats())
    one.infer("HtmlInRoot")
    assert len(one) == 1
    assert len(two) == 0
