import re

import pytest

from restructurer.errors import FrontmatterError
from restructurer.utils import parse_frontmatter, random_suffix, slugify, yaml_frontmatter_block


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Café Déjà", "cafe-deja"),
        ("My Post!", "my-post"),
        ("  Hello   World  ", "hello-world"),
        ("already-slugged_name", "already-slugged_name"),
        ("!!!???", ""),
        ("", ""),
        ("中文標題", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_only_emits_safe_characters():
    for text in ["Ünïcödé Tïtle", "C++ & Rust: a tale", "tabs\tand\nnewlines", "ﬁsh ½"]:
        assert re.fullmatch(r"[a-z0-9_-]*", slugify(text))


def test_slugify_accepts_non_strings():
    assert slugify(2024) == "2024"


def test_random_suffix_shape():
    assert re.fullmatch(r"[a-z0-9]{6}", random_suffix())


def test_parse_frontmatter_splits_body_untouched():
    fm, body = parse_frontmatter("---\ntitle: Hi\ntags: [a, b]\n---\nhello\n\nworld")
    assert fm == {"title": "Hi", "tags": ["a", "b"]}
    assert body == "hello\n\nworld"


def test_parse_frontmatter_without_fence():
    fm, body = parse_frontmatter("# Just a heading\n")
    assert fm == {}
    assert body == "# Just a heading\n"


def test_parse_frontmatter_empty_block():
    fm, body = parse_frontmatter("---\n---\nbody")
    assert fm == {}
    assert body == "body"


def test_parse_frontmatter_rejects_bad_yaml():
    with pytest.raises(FrontmatterError):
        parse_frontmatter("---\ntitle: [unclosed\n---\nbody", "post.md")


def test_parse_frontmatter_rejects_non_mapping():
    with pytest.raises(FrontmatterError, match="mapping"):
        parse_frontmatter("---\n- a\n- b\n---\nbody")


def test_yaml_block_does_not_wrap_long_values():
    title = " ".join(["word"] * 60)
    block = yaml_frontmatter_block({"title": title})
    assert block == f"---\ntitle: {title}\n---\n"


def test_yaml_block_keeps_dates_as_strings():
    block = yaml_frontmatter_block({"publishDate": "2024-01-02", "tags": []})
    assert "publishDate: '2024-01-02'\n" in block
    fm, _ = parse_frontmatter(block)
    assert fm["publishDate"] == "2024-01-02"
    assert "tags: []\n" in block


def test_yaml_block_keeps_empty_date_string():
    assert "publishDate: ''\n" in yaml_frontmatter_block({"publishDate": ""})


def test_parse_frontmatter_rejects_impossible_dates():
    with pytest.raises(FrontmatterError, match="invalid YAML"):
        parse_frontmatter("---\ndate: 2024-13-45\n---\nbody", "post.md")


def test_parse_frontmatter_keeps_crlf_body():
    fm, body = parse_frontmatter("---\r\ntitle: a\r\n---\r\nline1\r\nline2\r\n")
    assert fm == {"title": "a"}
    assert body == "line1\r\nline2\r\n"
