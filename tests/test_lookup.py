import logging

import pytest

from deskmenu.lookup import (
    ApplicationLookup,
    CommandLookup,
    lookup_name,
    parse_log_level,
    validate_search_path,
)


@pytest.fixture
def mapping():
    return {
        "Chromium": ("chromium-app", False),
        "Firefox": ("firefox-app", False),
        "Web browser": ("firefox-app", True),
    }


def test_exact_match(mapping):
    result = lookup_name("Firefox", mapping)
    assert result == ApplicationLookup("firefox-app", False, "")


def test_exact_match_generic(mapping):
    result = lookup_name("Web browser", mapping)
    assert result == ApplicationLookup("firefox-app", True)


def test_prefix_match_passes_arguments(mapping):
    result = lookup_name("Firefox --help", mapping)
    assert isinstance(result, ApplicationLookup)
    assert result.app == "firefox-app"
    assert result.args == " --help"


def test_prefix_uses_first_name_in_order():
    ordered = {"Fire": ("short", False), "Firefox": ("long", False)}
    result = lookup_name("Firefox --help", ordered)
    assert result.app == "short"
    assert result.args == "fox --help"


def test_unknown_query_is_command(mapping):
    assert lookup_name("Fire --help", mapping) == CommandLookup("Fire --help")


def test_empty_mapping_gives_command():
    assert lookup_name("ls -l", {}) == CommandLookup("ls -l")


def test_validate_removes_relative_paths():
    paths = ["/usr/share/applications/", "relative/applications/", "/opt/apps/"]
    assert validate_search_path(paths) == [
        "/usr/share/applications/",
        "/opt/apps/",
    ]


def test_validate_keeps_duplicates_and_warns(caplog):
    paths = ["/a/", "/a/"]
    with caplog.at_level(logging.WARNING, logger="deskmenu.lookup"):
        result = validate_search_path(paths)
    assert result == paths
    assert any("duplicate" in record.getMessage() for record in caplog.records)


def test_validate_keeps_empty_entry(caplog):
    with caplog.at_level(logging.WARNING, logger="deskmenu.lookup"):
        result = validate_search_path(["", "/a/"])
    assert result == ["", "/a/"]
    assert any("Empty path" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "name, level",
    [
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARNING", logging.WARNING),
        ("ERROR", logging.ERROR),
    ],
)
def test_parse_log_level(name, level):
    assert parse_log_level(name) == level


@pytest.mark.parametrize("name", ["debug", "VERBOSE", ""])
def test_parse_log_level_rejects_unknown(name):
    with pytest.raises(ValueError):
        parse_log_level(name)