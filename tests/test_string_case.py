"""Test case conversion of entry type names."""

import pytest

from zome_scaffold_generator.utils.string_case import (
    escape_rust_keyword,
    is_snake_case_identifier,
    is_title_case_identifier,
    snake_case,
    split_words,
    title_case,
)


class TestCaseConversion:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("my thing", "my_thing"),
            ("My Thing", "my_thing"),
            ("BlogPost", "blog_post"),
            ("blogPost", "blog_post"),
            ("comment-reply", "comment_reply"),
            ("getHTTPResponse", "get_http_response"),
            ("already_snake", "already_snake"),
            ("  padded   name ", "padded_name"),
            ("", ""),
        ],
    )
    def test_snake_case(self, name: str, expected: str) -> None:
        assert snake_case(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("my thing", "MyThing"),
            ("blog_post", "BlogPost"),
            ("BlogPost", "BlogPost"),
            ("comment-reply", "CommentReply"),
            ("post", "Post"),
            ("", ""),
        ],
    )
    def test_title_case(self, name: str, expected: str) -> None:
        assert title_case(name) == expected

    def test_split_words_handles_none(self) -> None:
        assert split_words(None) == []

    def test_identifier_checks(self) -> None:
        assert is_snake_case_identifier("my_thing")
        assert not is_snake_case_identifier("1thing")
        assert not is_snake_case_identifier("my_thing!")
        assert is_title_case_identifier("MyThing")
        assert not is_title_case_identifier("myThing")

    def test_escape_rust_keyword(self) -> None:
        assert escape_rust_keyword("type") == "r#type"
        assert escape_rust_keyword("title") == "title"

    @pytest.mark.parametrize("name", ["self", "super", "crate", "Self"])
    def test_path_keywords_are_never_raw(self, name: str) -> None:
        assert escape_rust_keyword(name) == name

    def test_digits_stay_attached_to_words(self) -> None:
        assert snake_case("thing2") == "thing2"
        assert title_case("thing2") == "Thing2"
