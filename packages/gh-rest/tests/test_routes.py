from gh_rest.routes import clean_data, make_replacements


def test_replaces_named_placeholder():
    assert (
        make_replacements("/gitignore/templates/{name}", {"name": "Python"})
        == "/gitignore/templates/Python"
    )


def test_value_is_inserted_literally():
    assert (
        make_replacements("/gitignore/templates/{name}", {"name": "C++"})
        == "/gitignore/templates/C++"
    )


def test_substituted_value_is_not_re_expanded():
    route = make_replacements(
        "/repos/{owner}/{repo}/license",
        {"owner": "{repo}", "repo": "hello"},
    )
    assert route == "/repos/{repo}/hello/license"


def test_missing_key_leaves_placeholder():
    assert make_replacements("/gitignore/templates/{name}", {}) == "/gitignore/templates/{name}"
    assert make_replacements("/gitignore/templates/{name}") == "/gitignore/templates/{name}"


def test_none_values_are_dropped_but_empty_strings_kept():
    assert make_replacements("/a/{x}/{y}", {"x": None, "y": ""}) == "/a/{x}/"


def test_non_string_values_are_stringified():
    assert make_replacements("/items/{id}", {"id": 42}) == "/items/42"


def test_unused_keys_are_ignored():
    assert make_replacements("/emojis", {"name": "Python"}) == "/emojis"


def test_clean_data_keeps_falsy_values():
    assert clean_data({"a": None, "b": 0, "c": False, "d": ""}) == {
        "b": 0,
        "c": False,
        "d": "",
    }
    assert clean_data(None) == {}
